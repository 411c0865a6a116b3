# celery -A worker.celery worker --loglevel=info
from appointments import create_app

app = create_app()
celery = app.extensions["celery"]
