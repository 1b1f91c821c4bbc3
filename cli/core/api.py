import requests
from typing import Any, Optional
from .config import BASE_URL, REQUEST_TIMEOUT, TOKEN_COOKIE


class ApiError(Exception):
    """Backend answered with an error status or could not be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _auth_headers(token: Optional[str]) -> dict:
    return {"Authorization": f"Bearer {token}"} if token else {}


def _request(method: str, path: str, token: Optional[str] = None, **kwargs: Any) -> requests.Response:
    url = f"{BASE_URL}{path}"
    try:
        resp = requests.request(method, url, headers=_auth_headers(token), timeout=REQUEST_TIMEOUT, **kwargs)
    except requests.RequestException as exc:
        raise ApiError(f"Could not reach backend at {BASE_URL}: {exc}") from exc

    if resp.status_code >= 400:
        try:
            message = resp.json().get("message") or resp.reason
        except ValueError:
            message = resp.reason
        raise ApiError(message, resp.status_code)
    return resp


def api_login(username: str, password: str, remember_me: bool = False) -> str:
    """
    Log in and return the access token set in the response cookie.
    """
    data = {"username": username, "password": password, "rememberMe": remember_me}
    resp = _request("POST", "/auth/login", json=data)
    token = resp.cookies.get(TOKEN_COOKIE)
    if not token:
        raise ApiError("Login response did not include an access token")
    return token


def api_logout(token: str) -> None:
    _request("POST", "/auth/logout", token)


def api_get_profile(token: str) -> dict:
    return _request("GET", "/auth/profile", token).json()


def api_check_auth_status(token: str) -> bool:
    """
    True while the backend still accepts the token.
    """
    try:
        resp = _request("GET", "/auth/checkAuthStatus", token)
    except ApiError as exc:
        if exc.status_code == 401:
            return False
        raise
    return bool(resp.json().get("isAuthenticated"))


def api_change_password(token: str, current_password: str, new_password: str) -> str:
    data = {"currentPassword": current_password, "newPassword": new_password}
    resp = _request("POST", "/auth/change-password", token, json=data)
    return resp.cookies.get(TOKEN_COOKIE) or token


def api_list_articles(token: Optional[str] = None) -> list:
    return _request("GET", "/articles", token).json()


def api_get_article(article_id: str, token: Optional[str] = None) -> dict:
    return _request("GET", f"/articles/{article_id}", token).json()


def api_create_article(article_data: dict, token: Optional[str] = None) -> dict:
    return _request("POST", "/articles", token, json=article_data).json()


def api_update_article(article_id: str, changes: dict, token: Optional[str] = None) -> dict:
    return _request("PATCH", f"/articles/{article_id}", token, json=changes).json()


def api_delete_article(article_id: str, token: Optional[str] = None) -> None:
    _request("DELETE", f"/articles/{article_id}", token)
