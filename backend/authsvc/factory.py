"""Application factory wiring Flask extensions, blueprints and the auth service."""

from __future__ import annotations

from flask import Flask

from authsvc.core.config import BaseConfig, get_config, load_token_config
from authsvc.core.logger import configure_logging, init_app as init_logging
from authsvc.services._shared.ports import CredentialStore


def create_app(
    config: type[BaseConfig] | object | None = None,
    *,
    store: CredentialStore | None = None,
) -> Flask:
    """Build and configure the Flask application.

    Parameters
    ----------
    config:
        Config class or object; defaults to the one selected by ``APP_ENV``.
    store:
        Credential store to use instead of the SQLAlchemy adapter.

    Raises
    ------
    ConfigurationError
        If the JWT signing secrets are missing. The app is never returned
        half-initialized.
    """

    app = Flask(__name__)
    app.config.from_object(get_config() if config is None else config)

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    from authsvc.core import database

    database.init_app(app)

    if store is None:
        from authsvc.infra.sqlalchemy import SQLAlchemyCredentialStore

        store = SQLAlchemyCredentialStore(database.get_session_factory(app))

    from authsvc.api.deps import AUTH_SERVICE_KEY
    from authsvc.services.auth.service import AuthService

    app.extensions[AUTH_SERVICE_KEY] = AuthService(
        config=load_token_config(app.config),
        store=store,
    )

    init_logging(app)

    from authsvc.core import cors, headers

    cors.init_app(app)
    headers.init_app(app)

    from authsvc.api import init_app as init_api

    init_api(app)

    from authsvc.core import errors

    errors.init_app(app)

    return app
