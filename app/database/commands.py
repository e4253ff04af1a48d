import click
from flask.cli import with_appcontext

from app.errors import ConflictError
from app.extensions import db
from app.services.auth import AuthService


@click.command("init-db")
@with_appcontext
def init_db():
    """Create all tables (use `flask db upgrade` once migrations exist)."""
    db.create_all()
    click.echo("✅ Tables created")


@click.command("create-user")
@click.argument("username")
@click.password_option()
@with_appcontext
def create_user(username, password):
    """Create a dashboard user."""
    try:
        user = AuthService.register(username, password)
    except ConflictError as e:
        raise click.ClickException(e.message)
    click.echo(f"✅ Created user '{user.username}' (id {user.id})")
