# Provisioning runs against the database directly, never through the HTTP API.
import getpass

import typer
from pydantic import ValidationError

from app.auth.schemas import AdminCreate
from app.core.database import build_engine, create_db_and_tables
from app.core.errors import AppError, ConflictError
from app.core.logging_config import configure_logging
from app.core.settings import get_settings
from app.core.init_db import create_admin, seed_admin


app = typer.Typer(help="Admin provisioning commands (seed, create)")


def _engine():
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    engine = build_engine(settings.DATABASE_URL)
    create_db_and_tables(engine)
    return settings, engine


@app.command("seed")
def seed():
    """
    Create the initial admin from INIT_ADMIN_USERNAME and INIT_ADMIN_PASSWORD.
    """
    settings, engine = _engine()
    try:
        admin = seed_admin(engine, settings)
    except ValueError as exc:
        typer.echo(f"Error: {exc}")
        raise typer.Exit(code=1)
    except AppError as exc:
        typer.echo(f"Admin creation failed: {exc.message}")
        raise typer.Exit(code=1)

    if admin is None:
        typer.echo(f"Admin '{settings.INIT_ADMIN_USERNAME}' already exists, skipping.")
    else:
        typer.echo(f"Admin '{admin.username}' created.")


@app.command("create")
def create(
    username: str = typer.Option(..., "--username", "-u", help="Username (4-20 characters)"),
    must_change_password: bool = typer.Option(
        False, "--must-change-password", help="Require a password change after first login"
    ),
):
    """
    Create an admin account.
    """
    password = getpass.getpass("Password: ")
    confirm = getpass.getpass("Confirm password: ")
    if password != confirm:
        typer.echo("Passwords do not match.")
        raise typer.Exit(code=1)

    try:
        AdminCreate(username=username, password=password)
    except ValidationError as exc:
        for err in exc.errors():
            typer.echo(f"Invalid {err['loc'][0]}: {err['msg']}")
        raise typer.Exit(code=1)

    settings, engine = _engine()
    try:
        admin = create_admin(engine, settings, username, password, must_change_password)
    except ConflictError:
        typer.echo(f"Admin '{username}' already exists.")
        raise typer.Exit(code=1)
    except AppError as exc:
        typer.echo(f"Admin creation failed: {exc.message}")
        raise typer.Exit(code=1)

    typer.echo(f"Admin '{admin.username}' created.")
