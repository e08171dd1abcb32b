# edgeblog/__init__.py
import logging
import sys

from flask import Flask

from edgeblog.config import Config
from edgeblog.errors import register_error_handlers
from edgeblog.extensions import blob_store, cors, db, mail, migrate
from edgeblog.routes import register_routes  # <- usar el init de routes


def configure_logging(app):
    log_level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stdout,
    )
    app.logger.setLevel(log_level)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)

    configure_logging(app)

    # Inicializar extensiones
    db.init_app(app)
    migrate.init_app(app, db)
    mail.init_app(app)
    blob_store.init_app(app)
    cors.init_app(
        app,
        resources={r"/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
        allow_headers=["Content-Type", "Authorization", "x-auth-token"],
    )

    # Registrar blueprints centralizado
    register_routes(app)
    register_error_handlers(app)

    # Para que Flask-Migrate vea los modelos
    from edgeblog import models  # noqa: F401

    return app
