import logging

from flask import Flask, jsonify
from dotenv import load_dotenv
from sqlalchemy.engine import make_url
from werkzeug.exceptions import HTTPException

load_dotenv()

from config import Config  # noqa: E402  (load_dotenv needs to run first)
from extensions import db  # noqa: E402  (load_dotenv needs to run first)
from logging_config import setup_logging  # noqa: E402

logger = logging.getLogger(__name__)


def create_app(config_overrides: dict | None = None, store=None) -> Flask:
    """Application factory for the equipment directory service.

    ``store`` replaces the SQL-backed ``EquipmentStore``; handlers only ever
    reach storage through ``app.extensions["equipment_store"]``.
    """

    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)
    app.json.sort_keys = False

    setup_logging(app.config.get("LOG_LEVEL"))

    # init extensions
    db.init_app(app)

    # blueprints
    from modules.equipment import bp as equipment_bp
    from modules.equipment.models import EquipmentStore

    app.register_blueprint(equipment_bp)

    @app.errorhandler(HTTPException)
    def http_error(err: HTTPException):
        return jsonify(message=err.description), err.code

    # DB
    with app.app_context():
        # Важно: модели должны быть импортированы до create_all()
        from modules.equipment import models as equipment_models  # noqa: F401

        db.create_all()

    app.extensions["equipment_store"] = store if store is not None else EquipmentStore(db)
    logger.info(
        "equipment service ready",
        extra={"backend": make_url(app.config["SQLALCHEMY_DATABASE_URI"]).drivername},
    )
    return app


if __name__ == "__main__":
    app = create_app()
    app.run(port=app.config["PORT"], debug=True)
