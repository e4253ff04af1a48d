import os
from datetime import timedelta
from dotenv import load_dotenv

load_dotenv() # Load variables from the .env file


def _database_uri():
    url = os.getenv('DATABASE_URL')
    if url:
        if url.startswith('postgres://'):
            url = url.replace('postgres://', 'postgresql://', 1)
        return url

    db_host = os.getenv('DB_HOST')
    if not db_host:
        return None

    # Build MySQL connection string (using PyMySQL driver)
    db_user = os.getenv('DB_USER')
    db_password = os.getenv('DB_PASSWORD')
    db_name = os.getenv('DB_NAME')
    return (
        f"mysql+pymysql://{db_user}@{db_host}/{db_name}"
        if not db_password else
        f"mysql+pymysql://{db_user}:{db_password}@{db_host}/{db_name}"
    )


class Config:
    SECRET_KEY = os.getenv('SESSION_SECRET') or os.getenv('SECRET_KEY', 'portfolio-dev-secret-change-me')

    SQLALCHEMY_DATABASE_URI = _database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False  # disables overhead warning

    # Server-side sessions live this long, the cookie is kept in sync
    SESSION_LIFETIME_DAYS = int(os.getenv('SESSION_LIFETIME_DAYS', '7'))
    PERMANENT_SESSION_LIFETIME = timedelta(days=SESSION_LIFETIME_DAYS)
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    OPENAI_API_KEY = os.getenv('OPENAI_API_KEY')
    OPENAI_MODEL = os.getenv('OPENAI_MODEL', 'gpt-4o')

    CORS_ORIGINS = [o.strip() for o in os.getenv('CORS_ORIGINS', 'http://localhost:3000').split(',') if o.strip()]

    UPLOAD_FOLDER = os.getenv('UPLOAD_FOLDER', 'uploads')
    BASE_URL = os.getenv('BASE_URL', 'http://localhost:5000')
    MAX_CONTENT_LENGTH = 5 * 1024 * 1024  # 5MB upload limit

    VISITOR_COOKIE_NAME = 'visitor_id'
    VISITOR_COOKIE_MAX_AGE = 365 * 24 * 60 * 60  # 1 year

    ADMIN_USERNAME = os.getenv('ADMIN_USERNAME', 'admin')
    ADMIN_PASSWORD = os.getenv('ADMIN_PASSWORD')

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    OPENAI_API_KEY = 'test-key'
    CORS_ORIGINS = ['http://localhost:3000']
    BCRYPT_LOG_ROUNDS = 4
