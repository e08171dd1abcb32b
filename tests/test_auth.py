from datetime import datetime, timedelta

import jwt

from edgeblog.auth.tokens import issue_token
from edgeblog.models import User
from edgeblog.services import accounts


def register(client, **overrides):
    payload = {"name": "A", "email": "a@x.com", "password": "secret1"}
    payload.update(overrides)
    return client.post("/register", json=payload)


class TestRegister:
    def test_register_returns_public_user(self, client):
        response = register(client)

        assert response.status_code == 201
        user = response.get_json()["user"]
        assert user["email"] == "a@x.com"
        assert user["role"] == "admin"
        assert user["isActive"] is True
        assert "password" not in user
        assert "password_hash" not in user

    def test_password_is_hashed(self, client):
        register(client)
        stored = User.query.filter_by(email="a@x.com").one()
        assert stored.password_hash != "secret1"

    def test_duplicate_email_conflicts(self, client):
        assert register(client).status_code == 201

        response = register(client, email="A@X.com ")

        assert response.status_code == 409
        assert response.get_json()["message"] == "A user with this email already exists."

    def test_concurrent_duplicate_email_conflicts(self, client, monkeypatch):
        assert register(client).status_code == 201
        # la comprobación previa no ve al otro registro: decide el UNIQUE
        monkeypatch.setattr(accounts, "find_user_by_email", lambda email: None)

        response = register(client)

        assert response.status_code == 409
        assert response.get_json()["message"] == "A user with this email already exists."
        assert User.query.filter_by(email="a@x.com").count() == 1

    def test_missing_fields(self, client):
        response = client.post("/register", json={"email": "a@x.com"})
        assert response.status_code == 400

    def test_short_password(self, client):
        assert register(client, password="123").status_code == 400


class TestLogin:
    def test_login_issues_signed_token(self, app, client, user):
        response = client.post("/login", json={"email": "ada@example.com", "password": "secret1"})

        assert response.status_code == 200
        body = response.get_json()
        payload = jwt.decode(body["token"], app.config["JWT_SECRET_KEY"], algorithms=["HS256"])
        assert payload["sub"] == str(user.id)
        assert payload["role"] == "admin"
        assert payload["name"] == "Ada Lovelace"
        assert payload["exp"] - payload["iat"] == 3600
        assert body["user"]["email"] == "ada@example.com"

    def test_wrong_password_looks_like_unknown_email(self, client, user):
        wrong_password = client.post("/login", json={"email": "ada@example.com", "password": "nope123"})
        unknown_email = client.post("/login", json={"email": "who@example.com", "password": "secret1"})

        assert wrong_password.status_code == unknown_email.status_code == 400
        assert wrong_password.get_json() == unknown_email.get_json() == {"message": "Invalid credentials."}

    def test_missing_fields(self, client):
        assert client.post("/login", json={"email": "ada@example.com"}).status_code == 400


class TestTokenRequired:
    def test_accepts_valid_bearer_token(self, client, auth_headers):
        assert client.get("/admin-dashboard", headers=auth_headers).status_code == 200

    def test_accepts_legacy_header(self, client, user):
        response = client.get("/admin-dashboard", headers={"x-auth-token": issue_token(user)})
        assert response.status_code == 200

    def test_rejects_missing_token(self, client):
        response = client.get("/admin-dashboard")
        assert response.status_code == 401
        assert response.get_json()["message"] == "No authentication token, authorization denied."

    def test_rejects_token_signed_with_other_secret(self, client, user):
        token = jwt.encode(
            {"sub": str(user.id), "exp": datetime.utcnow() + timedelta(hours=1)},
            "some-other-secret",
            algorithm="HS256",
        )
        response = client.get("/admin-dashboard", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.get_json()["message"] == "Authentication token is invalid."

    def test_rejects_expired_token(self, client, user):
        token = issue_token(user, expires_in=-10)
        response = client.get("/admin-dashboard", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.get_json()["message"] == "Authentication token has expired."

    def test_rejects_garbage(self, client):
        response = client.get("/admin-dashboard", headers={"Authorization": "Bearer not.a.jwt"})
        assert response.status_code == 401

    def test_missing_secret_fails_closed(self, app, client, auth_headers):
        app.config["JWT_SECRET_KEY"] = None

        response = client.get("/admin-dashboard", headers=auth_headers)

        assert response.status_code == 500
        assert "secret is missing" in response.get_json()["message"]

