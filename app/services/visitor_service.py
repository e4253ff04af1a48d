import logging
import secrets
from datetime import datetime

from flask import current_app, request

from app.extensions import db
from app.models import VisitorCounter, VisitorLog
import app.databases as databases

logger = logging.getLogger(__name__)


def new_visitor_id():
    return secrets.token_hex(16)


def get_visitor_id():
    """Visitor token from the cookie, or None for a first-time visitor."""
    return request.cookies.get(current_app.config["VISITOR_COOKIE_NAME"]) or None


def set_visitor_cookie(response, visitor_id):
    response.set_cookie(
        current_app.config["VISITOR_COOKIE_NAME"],
        visitor_id,
        max_age=current_app.config["VISITOR_COOKIE_MAX_AGE"],
        httponly=True,
        samesite="Lax",
    )
    return response


def _get_counter():
    counter = databases.get_singleton(VisitorCounter)
    if counter is None:
        counter = VisitorCounter(total_visitors=0, unique_visitors=0)
        db.session.add(counter)
    return counter


def get_visitor_stats():
    counter = databases.get_singleton(VisitorCounter)
    if counter is None:
        counter = _get_counter()
        databases.commit()
    return {"totalVisitors": counter.total_visitors, "uniqueVisitors": counter.unique_visitors}


def track_visitor(visitor_id):
    """
    Count one visit. Every call bumps the total, the unique count only moves
    the first time a token is seen. Read-then-write without locking, so
    concurrent visits may lose an increment.
    """
    now = datetime.utcnow()
    log = VisitorLog.query.filter_by(visitor_id=visitor_id).first()
    is_new_visitor = log is None

    counter = _get_counter()
    counter.total_visitors = (counter.total_visitors or 0) + 1
    if is_new_visitor:
        counter.unique_visitors = (counter.unique_visitors or 0) + 1
        db.session.add(VisitorLog(visitor_id=visitor_id, first_visit=now, last_visit=now))
    else:
        log.last_visit = now
    counter.last_updated = now

    databases.commit()

    if is_new_visitor:
        logger.info(f"👋 New visitor, {counter.unique_visitors} unique so far")

    return {
        "isNewVisitor": is_new_visitor,
        "totalVisitors": counter.total_visitors,
        "uniqueVisitors": counter.unique_visitors,
    }
