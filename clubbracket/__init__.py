"""Initialize the Flask app and its tournament store."""

import json
import os

import firebase_admin
from firebase_admin import credentials
from flask import Flask

from .core.constants import STORE_FIRESTORE, STORE_MEMORY
from .store import FirestoreTournamentStore, InMemoryTournamentStore


def _init_firebase(app):
    """Initialize the Firebase Admin SDK from env, file or default credentials."""
    cred = None
    project_id = None

    # First, try to load from environment variable (for production)
    cred_json = app.config.get("FIREBASE_CREDENTIALS_JSON")
    if cred_json:
        try:
            cred_info = json.loads(cred_json)
            project_id = cred_info.get("project_id")
            cred = credentials.Certificate(cred_info)
        except (json.JSONDecodeError, ValueError) as e:
            app.logger.error(f"Error parsing FIREBASE_CREDENTIALS_JSON: {e}")

    # If env var fails or is not present, try loading from file (for local dev)
    if not cred:
        cred_path = os.path.join(
            os.path.dirname(os.path.dirname(__file__)), "firebase_credentials.json"
        )
        if os.path.exists(cred_path):
            try:
                with open(cred_path, "r") as f:
                    cred_info = json.load(f)
                project_id = cred_info.get("project_id")
                cred = credentials.Certificate(cred_path)
            except (json.JSONDecodeError, ValueError) as e:
                app.logger.error(f"Error loading credentials from file: {e}")

    # If both methods fail, fallback to default credentials
    if not cred:
        try:
            cred = credentials.ApplicationDefault()
            project_id = app.config.get("FIREBASE_PROJECT_ID")
        except Exception as e:
            app.logger.error(
                f"Could not find any valid credentials (env, file, or default): {e}"
            )

    if cred and not firebase_admin._apps:
        try:
            options = {"projectId": project_id} if project_id else None
            firebase_admin.initialize_app(cred, options)
        except ValueError:
            # This can happen if the app is already initialized, which is fine.
            app.logger.info("Firebase app already initialized.")


def create_app(test_config=None):
    """Create and configure an instance of the Flask application."""
    app = Flask(__name__, instance_relative_config=True)

    # Load configuration
    app.config.from_mapping(
        SECRET_KEY=os.environ.get("SECRET_KEY") or "dev",
        TOURNAMENT_STORE=(os.environ.get("TOURNAMENT_STORE") or STORE_MEMORY).lower(),
        FIREBASE_CREDENTIALS_JSON=os.environ.get("FIREBASE_CREDENTIALS_JSON"),
        FIREBASE_PROJECT_ID=os.environ.get("FIREBASE_PROJECT_ID"),
    )

    if test_config:
        app.config.update(test_config)

    backend = app.config["TOURNAMENT_STORE"]
    if backend == STORE_FIRESTORE:
        # Initialize Firebase Admin SDK only if not in testing mode
        if not app.config.get("TESTING"):
            _init_firebase(app)
        store = FirestoreTournamentStore(app.config.get("FIRESTORE_CLIENT"))
    elif backend == STORE_MEMORY:
        store = InMemoryTournamentStore()
    else:
        raise ValueError(f"Unknown TOURNAMENT_STORE: {backend}")

    app.extensions["tournament_store"] = store
    if app.config.get("ID_FACTORY"):
        app.extensions["id_factory"] = app.config["ID_FACTORY"]
    app.logger.info(f"Using {backend} tournament store.")

    # Register blueprints
    from . import tournament as tournament_bp

    app.register_blueprint(tournament_bp.bp)

    from . import error_handlers

    app.register_blueprint(error_handlers.error_handlers_bp)

    return app
