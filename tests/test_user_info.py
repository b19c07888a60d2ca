"""Tests for /api/currentUser, /api/admin/users and /api/systemInfo."""

from conftest import ADMIN_EMAIL, USER_EMAIL


class TestCurrentUserEndpoint:
    def test_logged_out_users_cannot_get_current_user(self, client):
        assert client.get("/api/currentUser").status_code == 403

    def test_regular_user_sees_user_role_only(self, client, user_headers):
        response = client.get("/api/currentUser", headers=user_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["user"]["email"] == USER_EMAIL
        assert data["user"]["full_name"] == "Regular User"
        assert data["user"]["admin"] is False
        assert data["roles"] == ["ROLE_USER"]

    def test_admin_sees_both_roles(self, client, admin_headers):
        data = client.get("/api/currentUser", headers=admin_headers).json()

        assert data["user"]["email"] == ADMIN_EMAIL
        assert data["user"]["admin"] is True
        assert data["roles"] == ["ROLE_ADMIN", "ROLE_USER"]


class TestAdminUsersEndpoint:
    def test_regular_user_cannot_list_users(self, client, user_headers):
        assert client.get("/api/admin/users", headers=user_headers).status_code == 403

    def test_admin_lists_every_user_seen(self, client, user_headers, admin_headers):
        client.get("/api/currentUser", headers=user_headers)

        response = client.get("/api/admin/users", headers=admin_headers)

        assert response.status_code == 200
        emails = sorted(u["email"] for u in response.json())
        assert emails == [ADMIN_EMAIL, USER_EMAIL]


class TestSystemInfoEndpoint:
    def test_system_info_is_public(self, client):
        response = client.get("/api/systemInfo")

        assert response.status_code == 200
        assert response.json() == {"show_swagger_ui_link": True, "embedded_database": True}
