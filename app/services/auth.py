# app/services/auth.py
import logging
import secrets
from datetime import datetime, timedelta

from flask import current_app, session
from flask_login import current_user, login_user, logout_user

from app.errors import AuthError, ConflictError
from app.extensions import db, bcrypt, login_manager
from app.models import AuthSession, User
import app.databases as databases

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username or password"


class AuthService:
    @staticmethod
    def hash_password(password):
        return bcrypt.generate_password_hash(password).decode("utf-8")

    @staticmethod
    def authenticate_user(username, password):
        """
        Check username & password using bcrypt.
        Return the user, or raise AuthError with the same message whichever part was wrong.
        """
        logger.info(f"🔐 Auth attempt: {username}")

        user = databases.get_user_by_username(username)

        if not user:
            logger.info("❌ Login rejected: unknown user")
            raise AuthError(INVALID_CREDENTIALS)

        if not bcrypt.check_password_hash(user.password, password):
            logger.info("❌ Login rejected: bad password")
            raise AuthError(INVALID_CREDENTIALS)

        return user

    @staticmethod
    def login(username, password):
        """Authenticate and open a server-side session bound to the cookie."""
        user = AuthService.authenticate_user(username, password)

        lifetime = timedelta(days=current_app.config["SESSION_LIFETIME_DAYS"])
        auth_session = AuthSession(
            id=secrets.token_urlsafe(32),
            user_id=user.id,
            expires_at=datetime.utcnow() + lifetime,
        )
        db.session.add(auth_session)
        databases.commit()

        user.session_token = auth_session.id
        session.permanent = True
        login_user(user)

        logger.info(f"✅ Auth successful for {username}")
        return user

    @staticmethod
    def logout():
        token = getattr(current_user, "session_token", None)
        if token:
            AuthSession.query.filter_by(id=token).delete()
            databases.commit()
        logout_user()
        session.clear()

    @staticmethod
    def load_session_user(token):
        """Resolve a session token to its user; expired sessions are removed."""
        if not token:
            return None

        auth_session = db.session.get(AuthSession, token)
        if auth_session is None:
            return None

        if auth_session.is_expired():
            logger.info(f"⌛ Session for user {auth_session.user_id} expired")
            db.session.delete(auth_session)
            databases.commit()
            return None

        user = auth_session.user
        user.session_token = token
        return user

    @staticmethod
    def register(username, password):
        """
        Create a new user with a bcrypt-hashed password.
        """
        logger.info(f"📝 Register attempt: {username}")

        if databases.get_user_by_username(username):
            raise ConflictError("Username already taken")

        user = User(username=username, password=AuthService.hash_password(password))
        db.session.add(user)
        databases.commit()
        logger.info(f"✅ Registration successful for {username}")
        return user


@login_manager.user_loader
def load_user(token):
    return AuthService.load_session_user(token)


@login_manager.unauthorized_handler
def unauthorized():
    raise AuthError("Unauthorized")
