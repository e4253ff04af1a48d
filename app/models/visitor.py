from app.extensions import db
from datetime import datetime


class VisitorCounter(db.Model):
    __tablename__ = "visitor_counter"

    id = db.Column(db.Integer, primary_key=True)
    total_visitors = db.Column(db.Integer, nullable=False, default=0)
    unique_visitors = db.Column(db.Integer, nullable=False, default=0)
    last_updated = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)


class VisitorLog(db.Model):
    __tablename__ = "visitor_logs"

    id = db.Column(db.Integer, primary_key=True)
    visitor_id = db.Column(db.String(100), unique=True, nullable=False)
    first_visit = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    last_visit = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
