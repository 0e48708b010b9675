import os

import click
from flask import current_app
from flask.cli import with_appcontext

from extensions import db
from millionaire.constants import QUESTION_LEVELS
from millionaire.services.file_import_service import import_question_folder
from millionaire.services.question_bank import count_by_level


@click.command("init-db")
@with_appcontext
def init_db_command():
    """Create all tables."""
    db.create_all()
    click.echo("Database initialized.")


@click.command("import-questions")
@click.argument("folder", required=False)
@with_appcontext
def import_questions_command(folder):
    """Load question files (one file per level) into the question bank."""
    folder = folder or current_app.config["QUESTIONS_DIR"]
    if not os.path.isdir(folder):
        raise click.ClickException(f"Folder does not exist: {folder}")

    imported = import_question_folder(folder)
    for level in sorted(imported):
        click.echo(f"level {level}: {imported[level]} questions")

    counts = count_by_level()
    missing = [level for level in QUESTION_LEVELS if not counts.get(level)]
    if missing:
        click.echo(f"Warning: no questions for levels {missing}, games cannot be created yet.")


def register_commands(app):
    app.cli.add_command(init_db_command)
    app.cli.add_command(import_questions_command)
