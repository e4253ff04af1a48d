# app/routes/ai_routes.py
from flask import Blueprint, jsonify
from flask_login import login_required

from app.models import Project, Skill
from app.routes.crud import request_json
from app.schemas import (
    AnalyzeBlogSchema,
    BlogSuggestionsSchema,
    ChatSchema,
    GenerateBlogSchema,
    RecommendationSchema,
    validate,
)
from app.services import openai_service
import app.databases as databases

ai_bp = Blueprint("ai", __name__, url_prefix="/api")


@ai_bp.route("/ai/generate-blog", methods=["POST"])
@login_required
def generate_blog():
    data = validate(GenerateBlogSchema, request_json(), "blog generation")
    content = openai_service.generate_blog_post(
        title=data.title,
        topic=data.topic,
        keywords=data.keywords,
        length=data.length,
    )
    return jsonify(content)


@ai_bp.route("/ai/blog-suggestions", methods=["POST"])
@login_required
def blog_suggestions():
    data = validate(BlogSuggestionsSchema, request_json(), "blog suggestion")
    suggestions = openai_service.generate_blog_suggestions(data.user_profile, data.existing_topics)
    return jsonify({"suggestions": suggestions})


@ai_bp.route("/ai/analyze-blog", methods=["POST"])
@login_required
def analyze_blog():
    data = validate(AnalyzeBlogSchema, request_json(), "blog analysis")
    return jsonify(openai_service.analyze_blog_content(data.content))


# public chat widget
@ai_bp.route("/ai/chat", methods=["POST"])
def chat():
    data = validate(ChatSchema, request_json(), "chat")
    messages = [m.model_dump() for m in data.messages]
    return jsonify(openai_service.process_chat(messages))


@ai_bp.route("/content-recommendations", methods=["POST"])
def content_recommendations():
    data = validate(RecommendationSchema, request_json(), "recommendation")

    catalog = {
        "blogs": [
            {"title": p.title, "summary": p.summary, "slug": p.slug, "tags": p.tags or []}
            for p in databases.list_blog_posts()
        ],
        "projects": [
            {"id": p.id, "title": p.title, "description": p.description, "category": p.category}
            for p in databases.list_all(Project)
        ],
        "skills": [
            {"id": s.id, "name": s.name, "category": s.category}
            for s in databases.list_all(Skill)
        ],
    }

    recommendations = openai_service.generate_content_recommendations(
        data.user_interests, data.current_content, catalog, count=data.count
    )
    return jsonify(recommendations)
