import secrets

import click
from flask import current_app

from app.models import User
from app.services.auth import AuthService


def seed():
    click.echo("🌱 Seeding users...")

    username = current_app.config["ADMIN_USERNAME"]
    if User.query.filter_by(username=username).first():
        click.echo(f"ℹ️ User '{username}' already exists, skipping")
        return

    password = current_app.config.get("ADMIN_PASSWORD")
    generated = not password
    if generated:
        password = secrets.token_urlsafe(12)

    AuthService.register(username, password)

    if generated:
        click.echo(f"🔑 ADMIN_PASSWORD not set, generated password for '{username}': {password}")
    click.echo("✅ Users seeded successfully!")
