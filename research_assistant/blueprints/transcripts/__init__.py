from flask import Blueprint

bp = Blueprint("transcripts", __name__)

from . import routes  # noqa: E402,F401
