from flask import Flask, send_file, send_from_directory, current_app
from .config import config_by_name
from .extensions import db, migrate, jwt
from .log import configure_logging
from .api.v1 import v1_bp
from .middleware.request_logging import request_logging
from .errors import register_error_handlers
from flask_swagger_ui import get_swaggerui_blueprint
import os


def create_app(config_name: str = "development", overrides: dict | None = None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    if overrides:
        app.config.update(overrides)

    configure_logging(app.config.get("LOG_LEVEL"))

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)

    # -------------------------------------------------
    # Middleware
    # -------------------------------------------------
    request_logging(app)

    # -------------------------------------------------
    # API Blueprints
    # -------------------------------------------------
    app.register_blueprint(v1_bp, url_prefix="/api/v1")
    register_error_handlers(app)

    # -------------------------------------------------
    # Uploaded media (PUBLIC)
    # -------------------------------------------------
    @app.route("/media/<path:filename>", methods=["GET"], endpoint="media")
    def serve_media(filename):
        return send_from_directory(current_app.config["UPLOAD_FOLDER"], filename)

    # -------------------------------------------------
    # Serve OpenAPI YAML (PUBLIC)
    # -------------------------------------------------
    @app.route("/openapi/biolink.yaml", methods=["GET"], endpoint="openapi_biolink")
    def serve_openapi():
        spec_path = os.path.join(
            current_app.root_path,
            "api",
            "v1",
            "biolink_openapi.yaml",
        )

        if not os.path.exists(spec_path):
            raise FileNotFoundError("biolink_openapi.yaml not found")

        return send_file(
            spec_path,
            mimetype="application/yaml",
            as_attachment=False,
        )

    # -------------------------------------------------
    # Swagger UI
    # -------------------------------------------------
    SWAGGER_URL = "/swagger"
    API_URL = "/openapi/biolink.yaml"

    swaggerui_blueprint = get_swaggerui_blueprint(
        SWAGGER_URL,
        API_URL,
        config={
            "app_name": "Biolink API",
            "deepLinking": True,
            "persistAuthorization": True,
        },
    )

    app.register_blueprint(swaggerui_blueprint, url_prefix=SWAGGER_URL)

    return app
