# app/routes/blog_routes.py
import logging
import math
import re
from datetime import datetime

from flask import Blueprint, jsonify
from flask_login import login_required
from slugify import slugify

from app.errors import ValidationError
from app.models import BlogComment, BlogPost
from app.routes.crud import merged_payload, request_json
from app.schemas import BlogCommentSchema, BlogPostSchema, RewardSchema, validate
from app.services import reading_rewards
from app.services.visitor_service import get_visitor_id, new_visitor_id, set_visitor_cookie
import app.databases as databases

logger = logging.getLogger(__name__)

blog_bp = Blueprint("blog", __name__, url_prefix="/api/blog")

WORDS_PER_MINUTE = 200
TAG_RE = re.compile(r"<[^>]+>")


def estimate_reading_time(content):
    words = len(TAG_RE.sub(" ", content or "").split())
    return max(1, math.ceil(words / WORDS_PER_MINUTE))


def post_values(data):
    """Schema output -> column values, filling slug and reading time when omitted."""
    values = data.model_dump()
    values["slug"] = slugify(values.get("slug") or values["title"])
    if not values["slug"]:
        raise ValidationError(
            "Invalid blog post data",
            errors=[{"field": "slug", "message": "Could not derive a slug from the title"}],
        )
    if not values.get("reading_time"):
        values["reading_time"] = estimate_reading_time(values["content"])
    return values


# ==================== POSTS ====================

@blog_bp.route("", methods=["GET"])
def list_posts():
    posts = databases.list_blog_posts()
    return jsonify([databases.blog_post_to_dict(p) for p in posts])


@blog_bp.route("/slug/<slug>", methods=["GET"])
def get_post_by_slug(slug):
    post = databases.get_post_by_slug(slug)
    return jsonify(databases.blog_post_to_dict(post))


@blog_bp.route("/<int:post_id>", methods=["GET"])
def get_post(post_id):
    post = databases.get_or_404(BlogPost, post_id, "Blog post")
    return jsonify(databases.blog_post_to_dict(post))


@blog_bp.route("", methods=["POST"])
@login_required
def create_post():
    data = validate(BlogPostSchema, request_json(), "blog post")
    now = datetime.utcnow()
    post = BlogPost(published_at=now, **post_values(data))
    databases.save_blog_post(post)
    logger.info(f"📝 Published '{post.slug}'")
    return jsonify(databases.blog_post_to_dict(post)), 201


@blog_bp.route("/<int:post_id>", methods=["PATCH"])
@login_required
def update_post(post_id):
    post = databases.get_or_404(BlogPost, post_id, "Blog post")
    changes = request_json()
    current = databases.blog_post_to_dict(post)
    # new content without an explicit reading time gets a fresh estimate
    if "content" in changes and not {"readingTime", "reading_time"} & changes.keys():
        current.pop("readingTime")
    data = validate(BlogPostSchema, merged_payload(current, changes, BlogPostSchema), "blog post")
    for key, value in post_values(data).items():
        setattr(post, key, value)
    databases.save_blog_post(post)
    return jsonify(databases.blog_post_to_dict(post))


@blog_bp.route("/<int:post_id>", methods=["DELETE"])
@login_required
def delete_post(post_id):
    databases.delete(BlogPost, post_id, "Blog post")
    return jsonify({"message": "Blog post deleted successfully"}), 200


# ==================== COMMENTS ====================

@blog_bp.route("/<int:post_id>/comments", methods=["GET"])
def list_comments(post_id):
    comments = databases.get_blog_comments(post_id)
    return jsonify([databases.blog_comment_to_dict(c) for c in comments])


@blog_bp.route("/<int:post_id>/comments", methods=["POST"])
def create_comment(post_id):
    data = validate(BlogCommentSchema, request_json(), "comment")
    comment = databases.create_blog_comment(post_id, data.model_dump())
    return jsonify(databases.blog_comment_to_dict(comment)), 201


@blog_bp.route("/comments/<int:comment_id>", methods=["DELETE"])
@login_required
def delete_comment(comment_id):
    databases.delete(BlogComment, comment_id, "Comment")
    return jsonify({"message": "Comment deleted successfully"}), 200


# ==================== READING REWARDS ====================

@blog_bp.route("/slug/<slug>/rewards", methods=["GET"])
def post_rewards(slug):
    post = databases.get_post_by_slug(slug)
    visitor_id = get_visitor_id()
    return jsonify({"actions": reading_rewards.awarded_actions(visitor_id, post.id)})


@blog_bp.route("/slug/<slug>/rewards", methods=["POST"])
def award_reward(slug):
    post = databases.get_post_by_slug(slug)
    data = validate(RewardSchema, request_json(), "reward")

    visitor_id = get_visitor_id()
    is_new_cookie = visitor_id is None
    if is_new_cookie:
        visitor_id = new_visitor_id()

    result = reading_rewards.award(visitor_id, post, data.action)

    response = jsonify(result)
    if is_new_cookie:
        set_visitor_cookie(response, visitor_id)
    return response
