# cli/core/config.py
from pathlib import Path
import os

# Backend URL
BASE_URL = os.environ.get("CONTENT_ADMIN_URL", "http://localhost:8000")

# Cookie the backend uses to carry the access token
TOKEN_COOKIE = "access_token"

# Local data directory (session token)
APP_DIR = Path(os.environ.get("CONTENT_ADMIN_HOME", Path.home() / ".content-admin"))

SESSION_FILE = APP_DIR / "session.json"

REQUEST_TIMEOUT = 10
