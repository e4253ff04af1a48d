from flask.cli import with_appcontext
from app.database.seed.seed_users import seed as seed_users
from app.database.seed.seed_portfolio import seed as seed_portfolio
from app.database.seed.seed_blog import seed as seed_blog

import click

@click.command("seed-all")
@with_appcontext
def seed_all():
    """Run all database seeders."""
    click.echo("🌱 Seeding database...")
    seed_users()
    seed_portfolio()
    seed_blog()
    click.echo("✅ All seeders completed!")
