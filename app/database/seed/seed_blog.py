from datetime import datetime

import click

from app.extensions import db
from app.models import BlogPost

STARTER_POSTS = [
    {
        "title": "Getting Started with Web Development",
        "slug": "getting-started-with-web-development",
        "summary": "A beginner's guide to starting your journey in web development with the right tools and resources.",
        "content": (
            "<h1>Getting Started with Web Development</h1>"
            "<p>Web development is a diverse and exciting field that combines creativity with technical skills.</p>"
            "<h2>Choosing Your Path</h2>"
            "<ul><li><strong>Front-end</strong>: HTML, CSS and JavaScript for the user interface</li>"
            "<li><strong>Back-end</strong>: server-side logic, databases and APIs</li>"
            "<li><strong>Full-stack</strong>: both of the above</li></ul>"
            "<h2>Building Your First Projects</h2>"
            "<p>Start small: a personal portfolio, a to-do list, a weather app using a public API.</p>"
        ),
        "featured_image": "https://images.unsplash.com/photo-1593642532744-d377ab507dc8",
        "tags": ["Web Development", "Beginners", "HTML", "CSS", "JavaScript"],
        "reading_time": 8,
    },
    {
        "title": "Modern Frontend Frameworks Comparison",
        "slug": "modern-frontend-frameworks-comparison",
        "summary": "An in-depth analysis of React, Vue, and Angular to help you choose the right framework for your next project.",
        "content": (
            "<h1>Comparing Modern Frontend Frameworks</h1>"
            "<h2>React</h2><p>Component-based, flexible, with a massive ecosystem.</p>"
            "<h2>Vue</h2><p>Progressive, excellent documentation and a gentle learning curve.</p>"
            "<h2>Angular</h2><p>A complete framework with strong conventions for large applications.</p>"
            "<p>The best framework is the one that suits your project and your team.</p>"
        ),
        "featured_image": "https://images.unsplash.com/photo-1555066931-4365d14bab8c",
        "tags": ["JavaScript", "Frameworks", "React", "Vue", "Angular"],
        "reading_time": 12,
    },
    {
        "title": "Building Accessible Websites",
        "slug": "building-accessible-websites",
        "summary": "Learn why web accessibility matters and how to implement inclusive design principles in your projects.",
        "content": (
            "<h1>Building Accessible Websites</h1>"
            "<p>Web accessibility means designing websites that can be used by everyone.</p>"
            "<h2>Key WCAG Principles</h2>"
            "<ol><li>Perceivable</li><li>Operable</li><li>Understandable</li><li>Robust</li></ol>"
            "<h2>Practical Tips</h2>"
            "<p>Use semantic HTML, keep keyboard navigation working, write alt text and check contrast.</p>"
        ),
        "featured_image": "https://images.unsplash.com/photo-1573164713988-8665fc963095",
        "tags": ["Accessibility", "WCAG", "Inclusive Design", "UX"],
        "reading_time": 10,
    },
]


def seed():
    click.echo("🌱 Seeding blog posts...")

    if BlogPost.query.first():
        click.echo("ℹ️ Blog already has posts, skipping")
        return

    now = datetime.utcnow()
    for post in STARTER_POSTS:
        db.session.add(BlogPost(published_at=now, updated_at=now, is_ai_generated=False, **post))

    db.session.commit()
    click.echo(f"✅ {len(STARTER_POSTS)} blog posts seeded successfully!")
