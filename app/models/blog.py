from app.extensions import db
from datetime import datetime


class BlogPost(db.Model):
    __tablename__ = "blog_posts"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), unique=True, nullable=False)
    content = db.Column(db.Text, nullable=False)  # HTML
    summary = db.Column(db.Text, nullable=False)
    featured_image = db.Column(db.String(500))
    tags = db.Column(db.JSON, nullable=False, default=list)
    reading_time = db.Column(db.Integer, nullable=False)  # minutes
    is_ai_generated = db.Column(db.Boolean, default=False)
    published_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    comments = db.relationship("BlogComment", back_populates="post", cascade="all, delete-orphan")
    rewards = db.relationship("ReadingReward", back_populates="post", cascade="all, delete-orphan")


class BlogComment(db.Model):
    __tablename__ = "blog_comments"

    id = db.Column(db.Integer, primary_key=True)
    post_id = db.Column(db.Integer, db.ForeignKey("blog_posts.id", ondelete="CASCADE"), nullable=False)
    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    comment = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    post = db.relationship("BlogPost", back_populates="comments")
