# story_social/__init__.py

# =====================================================================================
# 1. Environment variables (loaded before anything reads them)
# =====================================================================================
from dotenv import load_dotenv
load_dotenv()

# =====================================================================================
# 2. Module imports
# =====================================================================================
import os
import logging
from typing import Any, Mapping, Optional
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException
from marshmallow import ValidationError
import firebase_admin
from firebase_admin import credentials

# - Config
from story_social.core.config import config_by_name

# - API blueprints
from story_social.api.comments.routes import comments_bp
from story_social.api.reactions.routes import reactions_bp

# - Services
from story_social.services.storage_service import create_storage_service
from story_social.api.comments.services import CommentService
from story_social.api.reactions.services import ReactionService
from story_social.api.responses import failure, internal_error, VALIDATION_ERROR
from story_social.utils.logging_utils import configure_request_logging

def _init_firebase(app: Flask):
    if firebase_admin._apps:
        return
    cred_path = app.config.get('FIREBASE_CREDENTIALS_PATH')
    if not cred_path or not os.path.exists(cred_path):
        raise FileNotFoundError(f"Firebase credentials file not found: {cred_path}")
    cred = credentials.Certificate(cred_path)
    firebase_admin.initialize_app(cred, {
        'storageBucket': app.config['FIREBASE_STORAGE_BUCKET']
    })

def create_app(config_name: Optional[str] = None, overrides: Optional[Mapping[str, Any]] = None):
    """
    Flask application factory.

    :param config_name: key of config_by_name; defaults to FLASK_ENV, then 'development'
    :param overrides: config values applied after the config class (used by tests)
    """
    # =====================================================================================
    # 3. Flask app and configuration
    # =====================================================================================
    config_name = config_name or os.getenv('FLASK_ENV', 'development')
    if config_name not in config_by_name:
        raise ValueError(f"Unknown config name: '{config_name}'")

    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    if overrides:
        app.config.update(overrides)
    app.json.ensure_ascii = False

    # =====================================================================================
    # 4. External services
    # =====================================================================================
    if app.config.get('STORAGE_BACKEND') == 'firebase':
        _init_firebase(app)

    # =====================================================================================
    # 5. Service instances, stored on app.services (dependency injection)
    # =====================================================================================
    app.services = {}

    try:
        app.services['storage'] = create_storage_service(app)
        logging.info(f"Storage service initialized ({app.config['STORAGE_BACKEND']})")
    except Exception as e:
        logging.error(f"Failed to initialize storage service: {e}")
        raise

    app.services['comments'] = CommentService(
        storage_service=app.services['storage'],
        prefix=app.config['COMMENTS_PREFIX']
    )
    app.services['reactions'] = ReactionService(
        storage_service=app.services['storage'],
        document_key=app.config['REACTIONS_DOCUMENT']
    )

    # =====================================================================================
    # 6. Blueprints
    # =====================================================================================
    app.register_blueprint(comments_bp, url_prefix='/api/comments')
    app.register_blueprint(reactions_bp, url_prefix='/api/reactions')

    @app.route('/health', methods=['GET'])
    def health():
        return jsonify({"status": "ok"}), 200

    # =====================================================================================
    # 7. Global error handlers
    # =====================================================================================
    @app.errorhandler(ValidationError)
    def handle_marshmallow_validation(err):
        return failure(VALIDATION_ERROR, "Invalid request parameters.", 400, err.messages)

    @app.errorhandler(HTTPException)
    def handle_http_exception(err):
        return failure(err.name.upper().replace(" ", "_"), err.description, err.code)

    @app.errorhandler(Exception)
    def handle_generic_exception(err):
        # Anything no other handler took.
        logging.error(f"An unhandled exception occurred: {err}", exc_info=True)
        return internal_error()

    # =====================================================================================
    # 8. Logging and return
    # =====================================================================================
    if not app.debug:
        logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]')
    configure_request_logging()

    logging.info(f"Flask app created for '{config_name}' environment.")

    return app
