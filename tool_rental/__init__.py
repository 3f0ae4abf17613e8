import atexit
import logging

from flask import Flask

from .config import Config
from .controllers.catalog import bp as catalog_bp
from .controllers.rentals import bp as rentals_bp
from .controllers.reports import bp as reports_bp
from .exceptions import NotFound, StoreError
from .models.store import Store
from .services.common import STORE_KEY
from .services.tool_service import ToolService
from .utils.constants import SAMPLE_TOOLS
from .utils.filters import fmt_local, fmt_money

# persistent stores to flush at exit, one per file; the hook is registered once
_open_stores: dict[str, Store] = {}
_atexit_registered = False


def _close_open_stores():
    for store in list(_open_stores.values()):
        store.close()


def _close_at_exit(store: Store) -> None:
    global _atexit_registered
    _open_stores[store.path] = store
    if not _atexit_registered:
        atexit.register(_close_open_stores)
        _atexit_registered = True


def seed_sample_tools(store: Store) -> int:
    """Add the sample tools to an empty catalogue; return how many were added."""
    if store.tools:
        return 0
    tools = ToolService(store)
    with store.transaction():
        for name, description, rate in SAMPLE_TOOLS:
            tools.create_tool(name, description, rate)
    return len(SAMPLE_TOOLS)


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(StoreError)
    def store_error(e):
        app.logger.error("Store failure: %s", e, exc_info=e)
        return "Database error", 500

    @app.errorhandler(NotFound)
    def not_found(e):
        app.logger.info("%s", e)
        return e.message, 404


def create_app(config_class=Config, store: Store | None = None):
    app = Flask(__name__, static_folder="static", template_folder="templates")
    app.config.from_object(config_class)
    app.logger.setLevel(app.config["LOG_LEVEL"])

    # one store per app, built here and flushed on process exit
    if store is None:
        store = Store(app.config["STORE_PATH"])
        if store.persistent and not app.config["TESTING"]:
            _close_at_exit(store)
    app.extensions[STORE_KEY] = store

    if app.config["SEED_SAMPLE_TOOLS"]:
        added = seed_sample_tools(store)
        if added:
            logging.getLogger(__name__).info("Seeded %d sample tools", added)

    app.register_blueprint(catalog_bp)
    app.register_blueprint(rentals_bp)
    app.register_blueprint(reports_bp)
    _register_error_handlers(app)
    app.jinja_env.filters["fmt_money"] = fmt_money
    app.jinja_env.filters["fmt_local"] = fmt_local

    return app
