import getpass
import re
import typer

from cli.core.session import save_token, load_token, clear_token, is_logged_in
from cli.core.api import ApiError, api_login, api_logout, api_get_profile, api_check_auth_status, api_change_password


app = typer.Typer(help="Authentication commands (login, logout, profile)")

USERNAME_REGEX = re.compile(r"^.{4,20}$")


def _require_token() -> str:
    token = load_token()
    if not token:
        typer.echo("No active session. Run `content-admin auth login` first.")
        raise typer.Exit(code=1)
    return token


@app.command("login")
def login(
    username: str = typer.Option(None, "--username", "-u", help="Username"),
    remember_me: bool = typer.Option(False, "--remember-me", help="Keep the session cookie for a day"),
):
    """
    Login to the backend. Only allowed if no session is active.
    """
    if is_logged_in():
        typer.echo("Session already active. Logout first to remove current session token.")
        raise typer.Exit(code=1)

    if username is None:
        username = typer.prompt("Username")

    if not USERNAME_REGEX.match(username):
        typer.echo("Invalid username. Use 4 to 20 characters.")
        raise typer.Exit(code=1)

    password = getpass.getpass("Password: ")

    try:
        token = api_login(username, password, remember_me)
    except ApiError as exc:
        typer.echo(f"Login failed: {exc.message}")
        raise typer.Exit(code=1)

    save_token(token)
    typer.echo(f"Login successful as '{username}'.")


@app.command("logout")
def logout():
    """
    End session and delete local token.
    """
    token = load_token()
    if token:
        try:
            api_logout(token)
        except ApiError as exc:
            typer.echo(f"Warning: backend logout failed ({exc.message}).")

    clear_token()
    typer.echo("Session ended.")


@app.command("profile")
def profile():
    """
    Show the admin named by the current session token.
    """
    token = _require_token()
    try:
        data = api_get_profile(token)
    except ApiError as exc:
        typer.echo(f"Could not load profile: {exc.message}")
        raise typer.Exit(code=1)

    typer.echo(f"Admin ID: {data['adminId']}")
    typer.echo(f"Username: {data['username']}")
    if data.get("mustChangePassword"):
        typer.echo("Password change required: run `content-admin auth change-password`.")


@app.command("status")
def status():
    """
    Check whether the stored session token is still accepted.
    """
    token = load_token()
    if not token:
        typer.echo("Not logged in.")
        raise typer.Exit(code=1)

    try:
        authenticated = api_check_auth_status(token)
    except ApiError as exc:
        typer.echo(f"Status check failed: {exc.message}")
        raise typer.Exit(code=1)

    if not authenticated:
        typer.echo("Session expired or invalid. Please login again.")
        raise typer.Exit(code=1)
    typer.echo("Authenticated.")


@app.command("change-password")
def change_password():
    """
    Change the current admin's password.
    """
    token = _require_token()
    current = getpass.getpass("Current password: ")
    new = getpass.getpass("New password: ")
    confirm = getpass.getpass("Confirm password: ")

    if new != confirm:
        typer.echo("Passwords do not match.")
        raise typer.Exit(code=1)

    try:
        new_token = api_change_password(token, current, new)
    except ApiError as exc:
        typer.echo(f"Password change failed: {exc.message}")
        raise typer.Exit(code=1)

    save_token(new_token)
    typer.echo("Password changed.")
