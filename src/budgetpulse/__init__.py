"""BudgetPulse application factory."""

from __future__ import annotations

from importlib import import_module
from typing import Iterable

from flask import Flask, render_template

from .config import BaseConfig, DevConfig, TestConfig

_CONFIG_MAP = {
    "development": DevConfig,
    "testing": TestConfig,
    "default": BaseConfig,
}


def _resolve_config(name: str | None) -> type[BaseConfig]:
    """Return the config class for the provided environment name."""

    if not name:
        return BaseConfig
    return _CONFIG_MAP.get(name.lower(), BaseConfig)


def _blueprint_paths() -> Iterable[str]:
    """Yield blueprint import paths in registration order."""

    yield "budgetpulse.blueprints.home"
    yield "budgetpulse.blueprints.auth"
    yield "budgetpulse.blueprints.dashboard"
    yield "budgetpulse.blueprints.account"


def create_app(config_name: str | None = None) -> Flask:
    """Create and configure the Flask application instance."""

    app = Flask(__name__, instance_relative_config=True)
    config_obj = _resolve_config(config_name)()
    app.config.from_object(config_obj)
    app.config["BUDGETPULSE_CONFIG"] = config_obj

    from .logging_config import setup_logging

    setup_logging(config_obj)

    # Imported lazily so model classes can be used without building an engine.
    from . import access, cli
    from .extensions import init_db

    init_db(app)
    access.init_app(app)
    _register_blueprints(app)
    _register_error_handlers(app)
    cli.init_app(app)

    return app


def _register_blueprints(app: Flask) -> None:
    """Import and register all blueprints declared in `_blueprint_paths`."""

    for dotted_path in _blueprint_paths():
        module = import_module(dotted_path)
        blueprint = getattr(module, "bp")
        app.register_blueprint(blueprint)


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(404)
    def _not_found(_error):
        return render_template("not_found.html"), 404


__all__ = ["BaseConfig", "DevConfig", "TestConfig", "create_app"]
