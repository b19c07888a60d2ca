"""Tests for /api/ucsbdiningcommons, whose records are keyed by code."""

ORTEGA = {
    "code": "ortega",
    "name": "Ortega",
    "has_sack_meal": True,
    "has_take_out_meal": True,
    "has_dining_cam": True,
    "latitude": 34.410987,
    "longitude": -119.84709,
}


def _post(client, headers, **overrides):
    return client.post("/api/ucsbdiningcommons/post", params={**ORTEGA, **overrides}, headers=headers)


class TestUCSBDiningCommons:
    def test_admin_can_post_commons(self, client, admin_headers):
        response = _post(client, admin_headers)

        assert response.status_code == 200
        assert response.json() == ORTEGA

    def test_user_can_get_by_code(self, client, admin_headers, user_headers):
        _post(client, admin_headers)

        response = client.get("/api/ucsbdiningcommons", params={"code": "ortega"}, headers=user_headers)

        assert response.status_code == 200
        assert response.json()["name"] == "Ortega"

    def test_missing_code_is_not_found(self, client, user_headers):
        response = client.get("/api/ucsbdiningcommons", params={"code": "munger-hall"}, headers=user_headers)

        assert response.status_code == 404
        assert response.json()["message"] == "UCSBDiningCommons with id munger-hall not found"

    def test_update_keeps_code_and_replaces_fields(self, client, admin_headers):
        _post(client, admin_headers)
        body = {
            "name": "Ortega Dining Commons",
            "has_sack_meal": False,
            "has_take_out_meal": True,
            "has_dining_cam": False,
            "latitude": 34.41,
            "longitude": -119.85,
        }

        response = client.put("/api/ucsbdiningcommons", params={"code": "ortega"}, json=body, headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"code": "ortega", **body}

    def test_delete_then_get_is_not_found(self, client, admin_headers):
        _post(client, admin_headers)

        response = client.delete("/api/ucsbdiningcommons", params={"code": "ortega"}, headers=admin_headers)
        assert response.json() == {"message": "UCSBDiningCommons with id ortega deleted"}

        assert client.get("/api/ucsbdiningcommons", params={"code": "ortega"}, headers=admin_headers).status_code == 404

    def test_duplicate_code_is_a_server_error(self, client, admin_headers):
        _post(client, admin_headers)

        response = _post(client, admin_headers, name="Ortega again")

        assert response.status_code == 500
        assert response.json()["type"] == "IntegrityError"
