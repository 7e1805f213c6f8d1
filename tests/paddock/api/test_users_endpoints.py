"""HTTP tests for /api/v1/users."""

from uuid import uuid4

USERS = "/api/v1/users"


class TestMe:
    def test_get_me(self, api):
        login = api.verified_user()

        response = api.client.get(f"{USERS}/me", headers=api.bearer(login["token"]))

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == login["user"]["id"]
        assert body["email"] == "alice@example.com"
        assert "passwordHash" not in body

    def test_get_me_without_token(self, client):
        response = client.get(f"{USERS}/me")

        assert response.status_code == 401
        assert response.json()["code"] == "UNAUTHORIZED"
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_get_me_with_garbage_token(self, api):
        response = api.client.get(f"{USERS}/me", headers=api.bearer("garbage"))

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid token"


class TestUpdateProfile:
    def test_update_whitelisted_fields_only(self, api):
        login = api.verified_user()
        headers = api.bearer(login["token"])

        response = api.client.put(
            f"{USERS}/me",
            headers=headers,
            json={
                "firstName": "Alicia",
                "businessName": "Rider Co",
                "email": "hijack@example.com",
                "isVerified": False,
                "password": "Hijacked123",
                "userType": "admin",
            },
        )

        assert response.status_code == 200
        body = response.json()
        assert body["firstName"] == "Alicia"
        assert body["lastName"] == "Rider"
        assert body["businessName"] == "Rider Co"
        assert body["email"] == "alice@example.com"
        assert body["isVerified"] is True
        assert body["userType"] == "buyer"
        assert api.login().status_code == 200
        assert api.login(password="Hijacked123").status_code == 401

    def test_blank_name_rejected(self, api):
        login = api.verified_user()

        response = api.client.put(
            f"{USERS}/me",
            headers=api.bearer(login["token"]),
            json={"lastName": "   "},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_requires_authentication(self, client):
        response = client.put(f"{USERS}/me", json={"firstName": "X"})
        assert response.status_code == 401


class TestChangePassword:
    def test_change_password(self, api):
        login = api.verified_user()

        response = api.client.post(
            f"{USERS}/change-password",
            headers=api.bearer(login["token"]),
            json={"currentPassword": "Password123", "newPassword": "NewPassword456"},
        )

        assert response.status_code == 200
        assert response.json()["message"] == "Password changed successfully"
        assert api.login(password="NewPassword456").status_code == 200

    def test_wrong_current_password(self, api):
        login = api.verified_user()

        response = api.client.post(
            f"{USERS}/change-password",
            headers=api.bearer(login["token"]),
            json={"currentPassword": "WrongPassword1", "newPassword": "NewPassword456"},
        )

        assert response.status_code == 401
        assert response.json() == {
            "detail": "Current password is incorrect",
            "code": "UNAUTHORIZED",
        }

    def test_empty_current_password_is_missing(self, api):
        login = api.verified_user()

        response = api.client.post(
            f"{USERS}/change-password",
            headers=api.bearer(login["token"]),
            json={"currentPassword": "", "newPassword": "NewPassword456"},
        )

        assert response.status_code == 400
        assert response.json() == {
            "detail": "Missing required field: currentPassword",
            "code": "VALIDATION_ERROR",
        }
        assert api.login().status_code == 200

    def test_weak_new_password(self, api):
        login = api.verified_user()

        response = api.client.post(
            f"{USERS}/change-password",
            headers=api.bearer(login["token"]),
            json={"currentPassword": "Password123", "newPassword": "short"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "WEAK_PASSWORD"


class TestPublicProfile:
    def test_public_profile_is_minimal(self, api):
        login = api.verified_user(userType="seller", businessName="Hilltop Stables")
        user_id = login["user"]["id"]

        response = api.client.get(f"{USERS}/{user_id}")

        assert response.status_code == 200
        assert response.json() == {
            "id": user_id,
            "firstName": "Alice",
            "lastName": "Rider",
            "businessName": "Hilltop Stables",
            "userType": "seller",
        }

    def test_unknown_id(self, client):
        response = client.get(f"{USERS}/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["code"] == "USER_NOT_FOUND"

    def test_malformed_id_is_not_found(self, client):
        response = client.get(f"{USERS}/not-a-uuid")

        assert response.status_code == 404
        assert response.json()["code"] == "USER_NOT_FOUND"
