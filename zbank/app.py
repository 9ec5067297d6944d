import logging

from flask import Flask, jsonify
from flask_cors import CORS
from dotenv import load_dotenv
from sqlalchemy import text
from werkzeug.exceptions import HTTPException

from zbank.config import Config
from zbank.db.session import engine, get_session
from zbank.logging_config import setup_logging
from zbank.models import Base
from zbank.routes import accounts_bp
from zbank.seed import seed_sample_accounts

logger = logging.getLogger(__name__)


def create_app(config_object=Config):
    load_dotenv()
    setup_logging(config_object.LOG_LEVEL, config_object.LOG_FORMAT)
    app = Flask(__name__)
    app.config.from_object(config_object)
    CORS(app, origins=config_object.CORS_ORIGINS)

    verify_database_connection()

    app.register_blueprint(accounts_bp, url_prefix="/api")

    @app.errorhandler(HTTPException)
    def handle_http_error(exc):
        return jsonify({"status": "error", "error": exc.name, "message": exc.description}), exc.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(exc):
        logger.exception("Unhandled error")
        return jsonify({"status": "error", "error": "Internal Server Error", "message": "Internal server error"}), 500

    @app.route("/api/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok"})

    with app.app_context():
        init_db(seed=app.config["SEED_SAMPLE_DATA"], environment=app.config["ZBANK_ENV"])

    logger.info("zbank started (env=%s)", app.config["ZBANK_ENV"])
    return app


def init_db(seed: bool = True, environment: str = Config.ZBANK_ENV):
    Base.metadata.create_all(bind=engine)
    if seed:
        seed_data(environment)


def verify_database_connection():
    with engine.connect() as connection:
        connection.execute(text("SELECT 1"))


def seed_data(environment: str) -> int:
    session = get_session()
    try:
        return seed_sample_accounts(session, environment)
    finally:
        session.close()


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=Config.PORT, debug=Config.ZBANK_ENV == "development")
