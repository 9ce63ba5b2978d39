"""API tests for registration, login and profile endpoints."""

import pytest
from bson import ObjectId

from primekart.services.token_service import TokenClaims


class TestRegister:
    def test_register_success(self, client, db):
        response = client.post(
            "/api/users/register",
            json={"name": "Alice", "email": "Alice@X.com", "password": "pw123"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "User registered"
        assert data["user"]["email"] == "alice@x.com"
        assert data["user"]["role"] == "user"
        assert data["token"]
        assert "password" not in data["user"]

        stored = db.users.find_one({"email": "alice@x.com"})
        assert stored["password"] != "pw123"
        assert stored["password"].startswith("$2")

    def test_duplicate_email_is_rejected_case_insensitively(self, client, db, register_user):
        register_user("Alice", "alice@x.com", "pw123")

        response = client.post(
            "/api/users/register",
            json={"name": "Alice 2", "email": "ALICE@x.com", "password": "other"},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "User already exists"
        assert db.users.count_documents({}) == 1

    def test_missing_fields_are_rejected(self, client, db):
        response = client.post("/api/users/register", json={"email": "a@x.com"})

        assert response.status_code == 400
        body = response.json()
        assert body["error"]["code"] == "INVALID_INPUT"
        assert body["error"]["details"]
        assert db.users.count_documents({}) == 0

    @pytest.mark.parametrize("email", ["   ", " a ", "  @x.com ", "alice.x.com"])
    def test_email_is_checked_after_stripping(self, client, db, email):
        response = client.post(
            "/api/users/register",
            json={"name": "X", "email": email, "password": "pw"},
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_INPUT"
        assert db.users.count_documents({}) == 0

    def test_surrounding_whitespace_is_stripped_from_email(self, client, db):
        response = client.post(
            "/api/users/register",
            json={"name": "Bob", "email": "  Bob@X.com ", "password": "pw"},
        )

        assert response.status_code == 201
        assert db.users.find_one()["email"] == "bob@x.com"

    def test_role_cannot_be_self_assigned(self, client, db):
        response = client.post(
            "/api/users/register",
            json={"name": "Eve", "email": "eve@x.com", "password": "pw", "role": "admin"},
        )

        assert response.status_code == 400
        assert db.users.count_documents({}) == 0


class TestLogin:
    def test_login_success(self, client, register_user):
        register_user("Alice", "alice@x.com", "pw123")

        response = client.post(
            "/api/users/login", json={"email": "ALICE@x.com", "password": "pw123"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Login successful"
        assert data["user"]["email"] == "alice@x.com"
        claims = client.app.state.token_service.validate(data["token"])
        assert claims.id == data["user"]["id"]
        assert claims.role == "user"

    def test_wrong_password(self, client, register_user):
        register_user("Alice", "alice@x.com", "pw123")

        response = client.post(
            "/api/users/login", json={"email": "alice@x.com", "password": "nope"}
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid credentials"

    def test_unknown_email(self, client):
        response = client.post(
            "/api/users/login", json={"email": "ghost@x.com", "password": "pw123"}
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid credentials"

    def test_blank_email_is_rejected(self, client):
        response = client.post("/api/users/login", json={"email": " ", "password": "pw"})

        assert response.status_code == 400


class TestMe:
    def test_returns_profile_without_password(self, client, user_token, auth_headers):
        response = client.get("/api/users/me", headers=auth_headers(user_token))

        assert response.status_code == 200
        data = response.json()
        assert data["email"] == "alice@x.com"
        assert data["name"] == "Alice"
        assert "password" not in data
        assert ObjectId.is_valid(data["id"])

    def test_requires_token(self, client):
        response = client.get("/api/users/me")

        assert response.status_code == 401
        assert response.json()["message"] == "No token provided"
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_rejects_bad_token(self, client, auth_headers):
        response = client.get("/api/users/me", headers=auth_headers("not.a.token"))

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid or expired token"

    def test_unknown_user_is_not_found(self, client, app, auth_headers):
        token = app.state.token_service.issue(
            TokenClaims(id=str(ObjectId()), email="ghost@x.com", role="user")
        )

        response = client.get("/api/users/me", headers=auth_headers(token))

        assert response.status_code == 404


class TestUpdateProfile:
    def test_user_updates_own_profile_and_cannot_touch_role_or_password(
        self, client, db, register_user, auth_headers
    ):
        body = register_user("Alice", "alice@x.com", "pw123")
        user_id = body["user"]["id"]

        response = client.put(
            f"/api/users/{user_id}",
            headers=auth_headers(body["token"]),
            json={"name": "Alice B", "phone": "555", "role": "admin", "password": "hacked"},
        )

        assert response.status_code == 200
        assert response.json() == {"message": "Profile updated"}
        stored = db.users.find_one({"_id": ObjectId(user_id)})
        assert stored["name"] == "Alice B"
        assert stored["phone"] == "555"
        assert stored["role"] == "user"
        assert stored["password"].startswith("$2")

    def test_other_user_is_forbidden(self, client, register_user, auth_headers):
        alice = register_user("Alice", "alice@x.com", "pw123")
        bob = register_user("Bob", "bob@x.com", "pw456")

        response = client.put(
            f"/api/users/{alice['user']['id']}",
            headers=auth_headers(bob["token"]),
            json={"name": "Pwned"},
        )

        assert response.status_code == 403
        assert response.json()["message"] == "Not allowed"

    def test_admin_may_update_anyone(self, client, db, register_user, admin_token, auth_headers):
        alice = register_user("Alice", "alice@x.com", "pw123")

        response = client.put(
            f"/api/users/{alice['user']['id']}",
            headers=auth_headers(admin_token),
            json={"name": "Renamed"},
        )

        assert response.status_code == 200
        assert db.users.find_one({"email": "alice@x.com"})["name"] == "Renamed"

    def test_admin_update_of_unknown_user_is_not_found(self, client, admin_token, auth_headers):
        response = client.put(
            f"/api/users/{ObjectId()}",
            headers=auth_headers(admin_token),
            json={"name": "Nobody"},
        )

        assert response.status_code == 404

    def test_empty_update_is_rejected(self, client, register_user, auth_headers):
        body = register_user("Alice", "alice@x.com", "pw123")

        response = client.put(
            f"/api/users/{body['user']['id']}",
            headers=auth_headers(body["token"]),
            json={"role": "admin"},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "No fields to update"
