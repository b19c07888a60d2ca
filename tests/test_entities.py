"""
Properties shared by every entity family.

Each case describes one family: its base path, the query parameters of a
valid create, a replacement body for update and the name of its
identifier field.
"""

import pytest

ENTITY_CASES = {
    "games": (
        "/api/games",
        {"name": "Zelda", "description": "Save the princess", "genre": "open world"},
        {"name": "Mario", "description": "Save the princess again", "genre": "platformer"},
        "id",
    ),
    "groceries": (
        "/api/groceries",
        {"name": "Banana", "price": "0.29", "expiration": "05-17-23"},
        {"name": "Apple", "price": "0.50", "expiration": "05-18-23"},
        "id",
    ),
    "hotels": (
        "/api/hotels",
        {"name": "Hotel Californian", "address": "36 State St", "description": "Beachfront"},
        {"name": "El Encanto", "address": "800 Alvarado Pl", "description": "Hillside"},
        "id",
    ),
    "restaurants": (
        "/api/restaurants",
        {"name": "Freebirds", "address": "879 Embarcadero del Norte", "description": "Burritos"},
        {"name": "Woodstock's", "address": "928 Embarcadero del Norte", "description": "Pizza"},
        "id",
    ),
    "songs": (
        "/api/songs",
        {"artist": "Taylor Swift", "album": "1989", "year": 2014},
        {"artist": "Taylor Swift", "album": "Midnights", "year": 2022},
        "id",
    ),
    "ucsbdates": (
        "/api/ucsbdates",
        {"quarter_yyyyq": "20222", "name": "firstDayOfClasses", "local_date_time": "2022-03-28T00:00:00"},
        {"quarter_yyyyq": "20223", "name": "lastDayOfClasses", "local_date_time": "2022-06-03T00:00:00"},
        "id",
    ),
}

CASES = pytest.mark.parametrize(
    "path,create_params,update_body,id_field",
    list(ENTITY_CASES.values()),
    ids=list(ENTITY_CASES.keys()),
)


def _create(client, headers, path, params):
    response = client.post(f"{path}/post", params=params, headers=headers)
    assert response.status_code == 200, response.text
    return response.json()


@CASES
def test_list_after_create_includes_record(client, admin_headers, user_headers, path, create_params, update_body, id_field):
    created = _create(client, admin_headers, path, create_params)

    listed = client.get(f"{path}/all", headers=user_headers).json()

    assert created in listed


@CASES
def test_get_after_delete_is_not_found(client, admin_headers, path, create_params, update_body, id_field):
    created = _create(client, admin_headers, path, create_params)
    record_id = created[id_field]

    assert client.delete(path, params={id_field: record_id}, headers=admin_headers).status_code == 200

    response = client.get(path, params={id_field: record_id}, headers=admin_headers)
    assert response.status_code == 404
    assert response.json()["message"].endswith(f"with id {record_id} not found")


@CASES
def test_update_after_delete_is_not_found_and_creates_nothing(client, admin_headers, path, create_params, update_body, id_field):
    created = _create(client, admin_headers, path, create_params)
    record_id = created[id_field]
    client.delete(path, params={id_field: record_id}, headers=admin_headers)

    response = client.put(path, params={id_field: record_id}, json=update_body, headers=admin_headers)

    assert response.status_code == 404
    assert client.get(f"{path}/all", headers=admin_headers).json() == []


@CASES
def test_identical_creates_get_distinct_ids(client, admin_headers, path, create_params, update_body, id_field):
    first = _create(client, admin_headers, path, create_params)
    second = _create(client, admin_headers, path, create_params)

    assert first[id_field] != second[id_field]
    assert len(client.get(f"{path}/all", headers=admin_headers).json()) == 2


@CASES
def test_update_replaces_fields(client, admin_headers, path, create_params, update_body, id_field):
    created = _create(client, admin_headers, path, create_params)

    response = client.put(path, params={id_field: created[id_field]}, json=update_body, headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {id_field: created[id_field], **update_body}
    fetched = client.get(path, params={id_field: created[id_field]}, headers=admin_headers).json()
    assert fetched == response.json()


@CASES
def test_regular_user_cannot_create(client, user_headers, path, create_params, update_body, id_field):
    response = client.post(f"{path}/post", params=create_params, headers=user_headers)
    assert response.status_code == 403
