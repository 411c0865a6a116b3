from appointments import create_app

app = create_app()
