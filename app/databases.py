import logging
from datetime import datetime

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.errors import ConflictError, NotFoundError
from app.extensions import db
from app.models import (
    BlogComment,
    BlogPost,
    Contact,
    Experience,
    Feedback,
    Profile,
    Project,
    Resume,
    Skill,
    Social,
    User,
)

logger = logging.getLogger(__name__)


def _iso(value):
    return value.isoformat() if value else None


# ==================== SERIALIZERS ====================

def user_to_dict(user):
    return {"id": user.id, "username": user.username, "createdAt": _iso(user.created_at)}


def profile_to_dict(profile):
    return {
        "id": profile.id,
        "fullName": profile.full_name,
        "title": profile.title,
        "bio": profile.bio,
        "email": profile.email,
        "phone": profile.phone,
        "location": profile.location,
        "avatarUrl": profile.avatar_url,
        "headerImage": profile.header_image,
    }


def skill_to_dict(skill):
    return {"id": skill.id, "name": skill.name, "category": skill.category, "level": skill.level}


def project_to_dict(project):
    return {
        "id": project.id,
        "title": project.title,
        "description": project.description,
        "category": project.category,
        "tags": project.tags or [],
        "image": project.image,
        "demoUrl": project.demo_url,
        "githubUrl": project.github_url,
    }


def experience_to_dict(experience):
    return {
        "id": experience.id,
        "company": experience.company,
        "jobTitle": experience.job_title,
        "description": experience.description,
        "startDate": _iso(experience.start_date),
        "endDate": _iso(experience.end_date),
        "technologies": experience.technologies or [],
    }


def social_to_dict(social):
    return {"id": social.id, "name": social.name, "url": social.url, "icon": social.icon}


def resume_to_dict(resume):
    return {
        "id": resume.id,
        "filename": resume.filename,
        "url": resume.url,
        "uploadedAt": _iso(resume.uploaded_at),
    }


def contact_to_dict(contact):
    return {
        "id": contact.id,
        "name": contact.name,
        "email": contact.email,
        "subject": contact.subject,
        "message": contact.message,
        "createdAt": _iso(contact.created_at),
    }


def feedback_to_dict(feedback):
    return {
        "id": feedback.id,
        "rating": feedback.rating,
        "comment": feedback.comment,
        "createdAt": _iso(feedback.created_at),
    }


def blog_post_to_dict(post):
    return {
        "id": post.id,
        "title": post.title,
        "slug": post.slug,
        "content": post.content,
        "summary": post.summary,
        "featuredImage": post.featured_image,
        "tags": post.tags or [],
        "readingTime": post.reading_time,
        "isAiGenerated": bool(post.is_ai_generated),
        "publishedAt": _iso(post.published_at),
        "updatedAt": _iso(post.updated_at),
    }


def blog_comment_to_dict(comment):
    return {
        "id": comment.id,
        "postId": comment.post_id,
        "name": comment.name,
        "email": comment.email,
        "comment": comment.comment,
        "createdAt": _iso(comment.created_at),
    }


# ==================== GENERIC CRUD ====================

def commit():
    """Commit the session, rolling back and re-raising on failure."""
    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error(f"❌ Database commit failed: {e}")
        raise


def list_all(model, *order_by):
    query = model.query
    if order_by:
        query = query.order_by(*order_by)
    else:
        query = query.order_by(model.id)
    return query.all()


def get_or_404(model, item_id, label=None):
    item = db.session.get(model, item_id)
    if item is None:
        raise NotFoundError(f"{label or model.__name__} not found")
    return item


def create(model, values):
    item = model(**values)
    db.session.add(item)
    commit()
    return item


def update(model, item_id, values, label=None):
    item = get_or_404(model, item_id, label)
    for key, value in values.items():
        setattr(item, key, value)
    commit()
    return item


def delete(model, item_id, label=None):
    item = get_or_404(model, item_id, label)
    db.session.delete(item)
    commit()


# ==================== SINGLETONS ====================

def get_singleton(model):
    """Profile/Resume/VisitorCounter only ever use their first row."""
    return model.query.order_by(model.id).first()


def upsert_singleton(model, values):
    item = get_singleton(model)
    if item is None:
        item = model(**values)
        db.session.add(item)
    else:
        for key, value in values.items():
            setattr(item, key, value)
    commit()
    return item


def get_profile():
    return get_singleton(Profile)


def get_resume():
    return get_singleton(Resume)


# ==================== BLOG ====================

def list_blog_posts():
    return BlogPost.query.order_by(BlogPost.published_at.desc(), BlogPost.id.desc()).all()


def get_post_by_slug(slug):
    post = BlogPost.query.filter_by(slug=slug).first()
    if post is None:
        raise NotFoundError("Blog post not found")
    return post


def slug_taken(slug, exclude_id=None):
    query = BlogPost.query.filter(BlogPost.slug == slug)
    if exclude_id is not None:
        query = query.filter(BlogPost.id != exclude_id)
    # a pending slug change on the edited post must not be flushed first
    with db.session.no_autoflush:
        return db.session.query(query.exists()).scalar()


def save_blog_post(post):
    """Insert or update a post, turning a slug collision into a 409."""
    if slug_taken(post.slug, exclude_id=post.id):
        db.session.rollback()
        raise ConflictError(f"A blog post with slug '{post.slug}' already exists")
    post.updated_at = datetime.utcnow()
    db.session.add(post)
    try:
        db.session.commit()
    except IntegrityError:
        # unique index caught a concurrent insert of the same slug
        db.session.rollback()
        raise ConflictError(f"A blog post with slug '{post.slug}' already exists")
    return post


def get_blog_comments(post_id):
    get_or_404(BlogPost, post_id, "Blog post")
    return (
        BlogComment.query.filter_by(post_id=post_id)
        .order_by(BlogComment.created_at, BlogComment.id)
        .all()
    )


def create_blog_comment(post_id, values):
    get_or_404(BlogPost, post_id, "Blog post")
    return create(BlogComment, dict(values, post_id=post_id))


# ==================== USERS & STATS ====================

def get_user_by_username(username):
    return User.query.filter_by(username=username).first()


def dashboard_stats():
    def count(model):
        return db.session.query(func.count(model.id)).scalar() or 0

    return {
        "skillsCount": count(Skill),
        "projectsCount": count(Project),
        "experiencesCount": count(Experience),
        "messagesCount": count(Contact),
        "feedbackCount": count(Feedback),
        "blogPostsCount": count(BlogPost),
    }
