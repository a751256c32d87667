from flask import Blueprint

# Single API blueprint mounted at /api
api_bp = Blueprint("api", __name__)


def legacy_route(rule, **options):
    """Register ``rule`` on the API blueprint together with its ``.php`` alias."""

    def decorator(fn):
        endpoint = options.pop("endpoint", fn.__name__)
        api_bp.add_url_rule(rule, endpoint=endpoint, view_func=fn, **options)
        api_bp.add_url_rule(f"{rule}.php", endpoint=endpoint, view_func=fn, **options)
        return fn
    return decorator


# Import route modules so they register with api_bp
from . import health
from . import auth
from . import admin
from . import content
from . import pages
from . import publications
from . import directory
from . import settings
from . import dashboard
from . import upload
