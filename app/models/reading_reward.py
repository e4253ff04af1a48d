from app.extensions import db
from datetime import datetime


class ReadingReward(db.Model):
    __tablename__ = "reading_rewards"
    __table_args__ = (
        db.UniqueConstraint("visitor_id", "post_id", "action", name="uq_reward_visitor_post_action"),
    )

    id = db.Column(db.Integer, primary_key=True)
    visitor_id = db.Column(db.String(100), nullable=False, index=True)
    post_id = db.Column(db.Integer, db.ForeignKey("blog_posts.id", ondelete="CASCADE"), nullable=False)
    action = db.Column(db.String(50), nullable=False)
    points = db.Column(db.Integer, nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    post = db.relationship("BlogPost", back_populates="rewards")
