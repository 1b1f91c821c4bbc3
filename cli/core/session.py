# cli/core/session.py
import json
from typing import Optional

from .config import APP_DIR, SESSION_FILE


def save_token(access_token: str) -> None:
    """
    Store the access token in the session file.
    """
    APP_DIR.mkdir(parents=True, exist_ok=True)
    data = {"access_token": access_token}
    with open(SESSION_FILE, "w", encoding="utf-8") as f:
        json.dump(data, f)


def load_token() -> Optional[str]:
    """
    Read the access token from the session file.
    Returns None when there is no file or it cannot be parsed.
    """
    if not SESSION_FILE.exists():
        return None

    try:
        with open(SESSION_FILE, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return None
    return data.get("access_token") if isinstance(data, dict) else None


def clear_token() -> None:
    """
    Delete the session file, ending the local session.
    """
    if SESSION_FILE.exists():
        SESSION_FILE.unlink()


def is_logged_in() -> bool:
    return load_token() is not None
