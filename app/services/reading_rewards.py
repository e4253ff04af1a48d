"""
Reading rewards: points a visitor earns for engaging with blog posts.

Each (visitor, post, action) triple pays out once; the unique constraint on
``reading_rewards`` makes a repeated award a no-op.
"""
import logging

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError

from app.errors import ValidationError
from app.extensions import db
from app.models import ReadingReward

logger = logging.getLogger(__name__)

ACTION_POINTS = {
    "like": 5,
    "share": 5,
    "bookmark": 8,
    "comment": 10,
    "code_copy": 3,
    "reading_2min": 5,
    "reading_5min": 10,
    "completed_reading": 15,
}

# highest threshold first
LEVELS = [
    (100, "Platinum Reader"),
    (50, "Gold Reader"),
    (20, "Silver Reader"),
    (0, "Bronze Reader"),
]


def level_for(points):
    for threshold, label in LEVELS:
        if points >= threshold:
            return label
    return LEVELS[-1][1]


def total_points(visitor_id):
    if not visitor_id:
        return 0
    total = (
        db.session.query(func.coalesce(func.sum(ReadingReward.points), 0))
        .filter(ReadingReward.visitor_id == visitor_id)
        .scalar()
    )
    return int(total or 0)


def awarded_actions(visitor_id, post_id):
    if not visitor_id:
        return []
    rows = (
        ReadingReward.query.filter_by(visitor_id=visitor_id, post_id=post_id)
        .order_by(ReadingReward.id)
        .all()
    )
    return [row.action for row in rows]


def award(visitor_id, post, action):
    if action not in ACTION_POINTS:
        raise ValidationError(
            "Invalid reward data",
            errors=[{"field": "action", "message": f"Unknown action '{action}'"}],
        )

    points = ACTION_POINTS[action]
    already = ReadingReward.query.filter_by(visitor_id=visitor_id, post_id=post.id, action=action).first()
    awarded = False
    if already is None:
        db.session.add(ReadingReward(visitor_id=visitor_id, post_id=post.id, action=action, points=points))
        try:
            db.session.commit()
            awarded = True
        except IntegrityError:
            # same award raced in from another request
            db.session.rollback()

    total = total_points(visitor_id)
    if awarded:
        logger.info(f"🏅 {action} on '{post.slug}' (+{points}, total {total})")

    return {
        "awarded": awarded,
        "points": points if awarded else 0,
        "totalPoints": total,
        "level": level_for(total),
        "actions": awarded_actions(visitor_id, post.id),
    }


def summary(visitor_id):
    total = total_points(visitor_id)
    return {"totalPoints": total, "level": level_for(total)}
