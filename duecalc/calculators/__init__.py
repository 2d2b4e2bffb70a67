from flask import Blueprint

calculators_bp = Blueprint('calculators', __name__)

from duecalc.calculators import routes
