from flask import Blueprint

auth_bp = Blueprint('auth_bp', __name__)


from .login import *
from .sign_up import *
from .me import *
