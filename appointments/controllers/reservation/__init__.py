from flask import Blueprint

reservation_bp = Blueprint('reservation_bp', __name__)


from .availability import *
from .reservation import *
from .status import *
