import logging

from flask import Flask
from config import Config
from pymysql import connect
from sqlalchemy.engine import make_url
from .extensions import *
from .models import *
from .errors import register_error_handlers
from .services.auth import AuthService  # registers the Flask-Login user loader
from .services.uploads import ensure_upload_folders
from .routes.auth_routes import auth_bp
from .routes.profile_routes import profile_bp
from .routes.skills import skills_bp
from .routes.projects import projects_bp
from .routes.experience import experience_bp
from .routes.socials import socials_bp
from .routes.contact_routes import contact_bp
from .routes.blog_routes import blog_bp
from .routes.ai_routes import ai_bp
from .routes.visitor_routes import visitor_bp
from .routes.upload_routes import upload_bp
from app.database.seed.seed_all import seed_all
from app.database.commands import init_db, create_user

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )

    if not app.config.get("SQLALCHEMY_DATABASE_URI"):
        raise RuntimeError("Database connection string not found. Set DATABASE_URL (or DB_HOST/DB_USER/DB_NAME).")

    # Allow CORS from the React front end, cookies included
    cors.init_app(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}}, supports_credentials=True)

    create_database_if_not_exists(app.config["SQLALCHEMY_DATABASE_URI"])

    # extensions initialization
    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)
    bcrypt.init_app(app)

    register_error_handlers(app)

    app.register_blueprint(auth_bp)
    app.register_blueprint(profile_bp)
    app.register_blueprint(skills_bp)
    app.register_blueprint(projects_bp)
    app.register_blueprint(experience_bp)
    app.register_blueprint(socials_bp)
    app.register_blueprint(contact_bp)
    app.register_blueprint(blog_bp)
    app.register_blueprint(ai_bp)
    app.register_blueprint(visitor_bp)
    app.register_blueprint(upload_bp)

    app.cli.add_command(seed_all)
    app.cli.add_command(init_db)
    app.cli.add_command(create_user)

    with app.app_context():
        ensure_upload_folders()

    return app


def create_database_if_not_exists(database_uri):
    """MySQL only: make sure the target database exists before connecting to it."""
    url = make_url(database_uri)
    if not url.drivername.startswith("mysql"):
        return

    logger.info(f"🔧 Ensuring database '{url.database}' exists...")
    logger.info(f"Connecting to DB server at {url.host}:{url.port or 3306} with user '{url.username}'")

    conn = connect(
        host=url.host,
        port=url.port or 3306,
        user=url.username,
        password=url.password or ""
    )
    try:
        with conn.cursor() as cursor:
            cursor.execute(f"CREATE DATABASE IF NOT EXISTS `{url.database}`")
        conn.commit()
    finally:
        conn.close()
