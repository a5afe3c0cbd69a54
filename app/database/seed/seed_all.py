from flask.cli import with_appcontext
from app.database.seed.seed_users import seed as seed_users
from app.database.seed.seed_profiles import seed as seed_profiles
from app.database.seed.seed_job_postings import seed as seed_job_postings

import click

@click.command("seed-all")
@with_appcontext
def seed_all():
    """Run all database seeders."""
    click.echo("🌱 Seeding database...")
    seed_users()
    seed_profiles()
    seed_job_postings()
    click.echo("✅ All seeders completed!")
