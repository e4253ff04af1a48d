from datetime import datetime

import click

from app.extensions import db
from app.models import Experience, Profile, Project, Resume, Skill, Social

PROFILE = {
    "full_name": "Alex Johnson",
    "title": "Full Stack Developer",
    "bio": (
        "Creative and detail-oriented Full Stack Developer with 5+ years of experience in building "
        "scalable web applications. Passionate about creating elegant solutions to complex problems "
        "and staying on top of emerging technologies."
    ),
    "email": "alex@example.com",
    "phone": "+1 (123) 456-7890",
    "location": "San Francisco, CA",
    "avatar_url": "https://i.pravatar.cc/300",
    "header_image": "https://images.unsplash.com/photo-1550745165-9bc0b252726f?auto=format&fit=crop&w=2070&q=80",
}

SKILLS = [
    ("JavaScript", "Frontend", 90),
    ("React", "Frontend", 85),
    ("TypeScript", "Frontend", 80),
    ("HTML/CSS", "Frontend", 95),
    ("Node.js", "Backend", 85),
    ("Express", "Backend", 80),
    ("MongoDB", "Backend", 75),
    ("PostgreSQL", "Backend", 70),
    ("AWS", "DevOps", 65),
    ("Docker", "DevOps", 70),
    ("Git", "Tools", 90),
    ("Jest", "Testing", 75),
]

PROJECTS = [
    {
        "title": "E-Commerce Platform",
        "description": "A full-featured e-commerce platform with payment processing, inventory management, and user authentication.",
        "image": "https://images.unsplash.com/photo-1563013544-824ae1b704d3?auto=format&fit=crop&w=1470&q=80",
        "category": "Web Application",
        "tags": ["React", "Node.js", "MongoDB", "Stripe"],
        "demo_url": "https://ecommerce-demo.example.com",
        "github_url": "https://github.com/example/ecommerce",
    },
    {
        "title": "Task Management App",
        "description": "A collaborative task management application with real-time updates, task assignments, and progress tracking.",
        "image": "https://images.unsplash.com/photo-1554224155-6726b3ff858f?auto=format&fit=crop&w=1472&q=80",
        "category": "Web Application",
        "tags": ["React", "Express", "Socket.io", "PostgreSQL"],
        "demo_url": "https://taskapp.example.com",
        "github_url": "https://github.com/example/taskapp",
    },
    {
        "title": "Fitness Tracker",
        "description": "A mobile-responsive fitness tracking application that monitors workouts, nutrition, and progress over time.",
        "image": "https://images.unsplash.com/photo-1571019613454-1cb2f99b2d8b?auto=format&fit=crop&w=1470&q=80",
        "category": "Mobile Application",
        "tags": ["React Native", "Firebase", "Charts.js"],
        "demo_url": "https://fitnessapp.example.com",
        "github_url": "https://github.com/example/fitness",
    },
    {
        "title": "Weather Dashboard",
        "description": "A real-time weather dashboard that provides detailed forecasts, historical data, and visualizations.",
        "image": "https://images.unsplash.com/photo-1592210454359-9043f067919b?auto=format&fit=crop&w=1470&q=80",
        "category": "Web Application",
        "tags": ["JavaScript", "OpenWeatherAPI", "D3.js"],
        "demo_url": "https://weather.example.com",
        "github_url": "https://github.com/example/weather",
    },
]

EXPERIENCES = [
    {
        "company": "Tech Innovations Inc.",
        "job_title": "Senior Full Stack Developer",
        "start_date": datetime(2020, 6, 1),
        "end_date": None,
        "technologies": ["React", "Node.js", "TypeScript", "AWS"],
        "description": "Leading development of the company's flagship SaaS product. Architected and implemented major features that increased user engagement by 40%.",
    },
    {
        "company": "WebSolutions Co.",
        "job_title": "Full Stack Developer",
        "start_date": datetime(2018, 3, 15),
        "end_date": datetime(2020, 5, 30),
        "technologies": ["React", "Express", "MongoDB", "Redux"],
        "description": "Developed and maintained multiple client projects. Built custom e-commerce solutions and implemented CI/CD pipelines that reduced deployment time by 50%.",
    },
    {
        "company": "Digital Creatives",
        "job_title": "Frontend Developer",
        "start_date": datetime(2016, 7, 10),
        "end_date": datetime(2018, 3, 1),
        "technologies": ["JavaScript", "HTML", "CSS", "jQuery"],
        "description": "Created responsive web designs and interactive UI components for client websites.",
    },
]

SOCIALS = [
    {
        "name": "GitHub",
        "url": "https://github.com/alexjohnson",
        "icon": '<path d="M12 0c-6.626 0-12 5.373-12 12 0 5.302 3.438 9.8 8.207 11.387.599.111.793-.261.793-.577v-2.234c-3.338.726-4.033-1.416-4.033-1.416-.546-1.387-1.333-1.756-1.333-1.756-1.089-.745.083-.729.083-.729 1.205.084 1.839 1.237 1.839 1.237 1.07 1.834 2.807 1.304 3.492.997.107-.775.418-1.305.762-1.604-2.665-.305-5.467-1.334-5.467-5.931 0-1.311.469-2.381 1.236-3.221-.124-.303-.535-1.524.117-3.176 0 0 1.008-.322 3.301 1.23.957-.266 1.983-.399 3.003-.404 1.02.005 2.047.138 3.006.404 2.291-1.552 3.297-1.23 3.297-1.23.653 1.653.242 2.874.118 3.176.77.84 1.235 1.911 1.235 3.221 0 4.609-2.807 5.624-5.479 5.921.43.372.823 1.102.823 2.222v3.293c0 .319.192.694.801.576 4.765-1.589 8.199-6.086 8.199-11.386 0-6.627-5.373-12-12-12z"/>',
    },
    {
        "name": "LinkedIn",
        "url": "https://linkedin.com/in/alexjohnson",
        "icon": '<path d="M4.98 3.5c0 1.381-1.11 2.5-2.48 2.5s-2.48-1.119-2.48-2.5c0-1.38 1.11-2.5 2.48-2.5s2.48 1.12 2.48 2.5zm.02 4.5h-5v16h5v-16zm7.982 0h-4.968v16h4.969v-8.399c0-4.67 6.029-5.052 6.029 0v8.399h4.988v-10.131c0-7.88-8.922-7.593-11.018-3.714v-2.155z"/>',
    },
]


def seed():
    click.echo("🌱 Seeding portfolio content...")

    # each section only when empty, so re-running never duplicates
    if not Profile.query.first():
        db.session.add(Profile(**PROFILE))

    if not Skill.query.first():
        for name, category, level in SKILLS:
            db.session.add(Skill(name=name, category=category, level=level))

    if not Project.query.first():
        for project in PROJECTS:
            db.session.add(Project(**project))

    if not Experience.query.first():
        for experience in EXPERIENCES:
            db.session.add(Experience(**experience))

    if not Social.query.first():
        for social in SOCIALS:
            db.session.add(Social(**social))

    if not Resume.query.first():
        db.session.add(Resume(
            filename="Alex_Johnson_Resume.pdf",
            url="https://example.com/resume.pdf",
            uploaded_at=datetime.utcnow(),
        ))

    db.session.commit()
    click.echo("✅ Portfolio content seeded successfully!")
