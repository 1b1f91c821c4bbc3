import unittest

from sqlmodel import Session

from app.auth.admins import AdminStore
from app.auth.tokens import TokenService
from app.core.errors import ConflictError
from support import FakeClock, make_client


class AuthApiTestCase(unittest.TestCase):

    def setUp(self):
        self.client = make_client()
        self.client.__enter__()
        self.addCleanup(self.client.__exit__, None, None, None)
        self.app = self.client.app
        self.alice = self.create_admin("alice", "Secret123")

    def create_admin(self, username, password, must_change_password=False):
        hasher = self.app.state.password_hasher
        with Session(self.app.state.engine) as session:
            admin = AdminStore(session).create(username, hasher.hash(password), must_change_password)
            return admin.id

    def login(self, username="alice", password="Secret123", remember_me=False):
        return self.client.post(
            "/auth/login",
            json={"username": username, "password": password, "rememberMe": remember_me},
        )


class TestLogin(AuthApiTestCase):

    def test_login_sets_session_cookie(self):
        response = self.login()
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"message": "Login successful", "code": 200})

        cookie = response.headers["set-cookie"]
        self.assertIn("access_token=", cookie)
        self.assertIn("HttpOnly", cookie)
        self.assertIn("samesite=strict", cookie.lower())
        self.assertNotIn("Max-Age", cookie)
        self.assertNotIn("access_token", response.json())

    def test_login_remember_me(self):
        response = self.login(remember_me=True)
        self.assertEqual(response.status_code, 200)
        self.assertIn("Max-Age=86400", response.headers["set-cookie"])

    def test_login_remember_me_defaults_to_false(self):
        response = self.client.post("/auth/login", json={"username": "alice", "password": "Secret123"})
        self.assertEqual(response.status_code, 200)
        self.assertNotIn("Max-Age", response.headers["set-cookie"])

    def test_wrong_password(self):
        response = self.login(password="wrongpass")
        self.assertEqual(response.status_code, 401)
        body = response.json()
        self.assertEqual(body["error"], "InvalidCredentials")
        self.assertEqual(body["code"], 401)
        self.assertNotIn("set-cookie", response.headers)

    def test_unknown_user_gets_same_answer(self):
        wrong = self.login(password="wrongpass").json()
        unknown = self.login(username="nobody").json()
        self.assertEqual(wrong, unknown)

    def test_missing_fields(self):
        response = self.client.post("/auth/login", json={"username": "alice"})
        self.assertEqual(response.status_code, 400)
        body = response.json()
        self.assertEqual(body["error"], "ValidationError")
        fields = [err["field"] for err in body["detail"]["errors"]]
        self.assertIn("password", fields)

    def test_unknown_fields_rejected(self):
        response = self.client.post(
            "/auth/login", json={"username": "alice", "password": "Secret123", "role": "root"}
        )
        self.assertEqual(response.status_code, 400)


class TestProtectedRoutes(AuthApiTestCase):

    def test_profile_requires_token(self):
        response = self.client.get("/auth/profile")
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()["error"], "Unauthorized")
        self.assertEqual(response.headers["www-authenticate"], "Bearer")

    def test_profile_with_cookie(self):
        self.login()
        response = self.client.get("/auth/profile")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"adminId": self.alice, "username": "alice"})

    def test_profile_with_bearer_header(self):
        token = self.login().cookies["access_token"]
        self.client.cookies.clear()
        response = self.client.get("/auth/profile", headers={"Authorization": f"Bearer {token}"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["username"], "alice")

    def test_profile_with_invalid_token(self):
        response = self.client.get("/auth/profile", headers={"Authorization": "Bearer not.a.token"})
        self.assertEqual(response.status_code, 401)

    def test_check_auth_status(self):
        self.assertEqual(self.client.get("/auth/checkAuthStatus").status_code, 401)
        self.login()
        response = self.client.get("/auth/checkAuthStatus")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"isAuthenticated": True})

    def test_expired_token(self):
        clock = FakeClock()
        self.app.state.token_service = TokenService(self.app.state.settings, clock=clock)
        self.login()
        self.assertEqual(self.client.get("/auth/profile").status_code, 200)

        clock.advance(self.app.state.settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60)
        self.assertEqual(self.client.get("/auth/profile").status_code, 401)

    def test_logout_clears_cookie(self):
        self.login()
        response = self.client.post("/auth/logout")
        self.assertEqual(response.status_code, 200)
        self.assertIn("Max-Age=0", response.headers["set-cookie"])
        self.assertEqual(self.client.get("/auth/profile").status_code, 401)


class TestChangePassword(AuthApiTestCase):

    def test_change_password_replaces_token(self):
        self.create_admin("carol", "Initial1", must_change_password=True)
        self.login("carol", "Initial1")
        profile = self.client.get("/auth/profile").json()
        self.assertTrue(profile["mustChangePassword"])

        response = self.client.post(
            "/auth/change-password",
            json={"currentPassword": "Initial1", "newPassword": "Changed1"},
        )
        self.assertEqual(response.status_code, 200)
        self.assertIn("access_token=", response.headers["set-cookie"])
        self.assertNotIn("mustChangePassword", self.client.get("/auth/profile").json())

        self.assertEqual(self.login("carol", "Initial1").status_code, 401)
        self.assertEqual(self.login("carol", "Changed1").status_code, 200)

    def test_change_password_requires_token(self):
        response = self.client.post(
            "/auth/change-password",
            json={"currentPassword": "Secret123", "newPassword": "Changed1"},
        )
        self.assertEqual(response.status_code, 401)

    def test_change_password_wrong_current(self):
        self.login()
        response = self.client.post(
            "/auth/change-password",
            json={"currentPassword": "nope", "newPassword": "Changed1"},
        )
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()["error"], "InvalidCredentials")

    def test_change_password_too_short(self):
        self.login()
        response = self.client.post(
            "/auth/change-password",
            json={"currentPassword": "Secret123", "newPassword": "abc"},
        )
        self.assertEqual(response.status_code, 400)


class TestAdminProvisioning(AuthApiTestCase):

    def test_duplicate_username_conflicts(self):
        with self.assertRaises(ConflictError) as ctx:
            self.create_admin("alice", "Another1")
        self.assertEqual(ctx.exception.status_code, 409)


if __name__ == "__main__":
    unittest.main()
