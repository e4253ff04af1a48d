from ..extensions import db
from datetime import datetime
from flask_login import UserMixin


class User(UserMixin, db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(80), unique=True, nullable=False)
    password = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    sessions = db.relationship("AuthSession", back_populates="user", cascade="all, delete-orphan")

    # set by the user loader / login, never persisted
    session_token = None

    def get_id(self):
        # Flask-Login stores this in the cookie session, so it must be the
        # server-side session token rather than the user id
        return self.session_token

    # for string representation
    def __repr__(self):
        return f"<User {self.username}>"


class AuthSession(db.Model):
    __tablename__ = "auth_sessions"

    id = db.Column(db.String(64), primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    expires_at = db.Column(db.DateTime, nullable=False)

    user = db.relationship("User", back_populates="sessions")

    def is_expired(self, now=None):
        return (now or datetime.utcnow()) >= self.expires_at
