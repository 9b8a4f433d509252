"""
Tests de l'API REST (/rest) sur l'application complete.

Couvre les codes de statut, les en-tetes ETag / If-None-Match / If-Match / Location,
la pagination et la protection des ecritures par roles.
"""

import pytest


def _create(client, payload, headers) -> int:
    response = client.post("/rest", json=payload, headers=headers)
    assert response.status_code == 201
    return response.json()["id"]


def _update_payload(payload: dict, **overrides) -> dict:
    values = {key: value for key, value in payload.items() if key not in ("beschreibung", "schauspieler")}
    values.update(overrides)
    return values


class TestGetById:
    """Tests pour GET /rest/{id}."""

    def test_found_with_etag(self, client, film_payload, admin_headers):
        film_id = _create(client, film_payload, admin_headers)

        response = client.get(f"/rest/{film_id}")

        assert response.status_code == 200
        assert response.headers["ETag"] == '"0"'
        body = response.json()
        assert body["id"] == film_id
        assert body["imdbId"] == "tt0245429"
        assert body["dauerMin"] == 125
        assert body["beschreibung"]["beschreibung"] == "Ein Maedchen in der Geisterwelt."
        assert body["schauspieler"][0]["nachname"] == "Hiiragi"

    def test_not_modified(self, client, film_payload, admin_headers):
        film_id = _create(client, film_payload, admin_headers)

        response = client.get(f"/rest/{film_id}", headers={"If-None-Match": '"0"'})

        assert response.status_code == 304

    def test_stale_if_none_match(self, client, film_payload, admin_headers):
        film_id = _create(client, film_payload, admin_headers)

        response = client.get(f"/rest/{film_id}", headers={"If-None-Match": '"7"'})

        assert response.status_code == 200

    @pytest.mark.parametrize("film_id", ["999", "abc", "0"])
    def test_not_found(self, client, film_id):
        response = client.get(f"/rest/{film_id}")

        assert response.status_code == 404
        assert response.json()["statusCode"] == 404


class TestFind:
    """Tests pour GET /rest (recherche paginee)."""

    def test_empty_catalog_is_empty_page(self, client):
        response = client.get("/rest")

        assert response.status_code == 200
        body = response.json()
        assert body["content"] == []
        assert body["page"] == {"number": 0, "size": 5, "totalElements": 0, "totalPages": 0}

    def test_pagination(self, client, film_payload, admin_headers):
        for i in range(7):
            _create(client, {**film_payload, "imdbId": f"tt100000{i}", "titel": f"Film {i}"}, admin_headers)

        response = client.get("/rest", params={"page": 1, "size": 5})

        body = response.json()
        assert [f["titel"] for f in body["content"]] == ["Film 5", "Film 6"]
        assert body["page"] == {"number": 1, "size": 5, "totalElements": 7, "totalPages": 2}

    def test_filters(self, client, film_payload, admin_headers):
        _create(client, film_payload, admin_headers)
        _create(
            client,
            {**film_payload, "imdbId": "tt0102926", "titel": "Thriller", "art": "THRILLER", "bewertung": 2},
            admin_headers,
        )

        response = client.get("/rest", params={"titel": "chihiro", "bewertung": "3"})

        body = response.json()
        assert [f["imdbId"] for f in body["content"]] == ["tt0245429"]
        assert body["page"]["totalElements"] == 1

    def test_unparseable_filter_is_ignored(self, client, film_payload, admin_headers):
        _create(client, film_payload, admin_headers)

        response = client.get("/rest", params={"bewertung": "abc"})

        assert response.json()["page"]["totalElements"] == 1

    @pytest.mark.parametrize("name", ["bewertung", "dauerMin"])
    def test_filter_beyond_sql_integer_is_ignored(self, client, film_payload, admin_headers, name):
        _create(client, film_payload, admin_headers)

        response = client.get("/rest", params={name: "99999999999999999999"})

        assert response.status_code == 200
        assert response.json()["page"]["totalElements"] == 1

    def test_page_beyond_sql_integer_returns_first_page(self, client, film_payload, admin_headers):
        _create(client, film_payload, admin_headers)

        response = client.get("/rest", params={"page": "99999999999999999999"})

        assert response.status_code == 200
        body = response.json()
        assert body["page"]["number"] == 0
        assert [f["imdbId"] for f in body["content"]] == ["tt0245429"]


class TestCreate:
    """Tests pour POST /rest."""

    def test_created_with_location(self, client, film_payload, user_headers):
        response = client.post("/rest", json=film_payload, headers=user_headers)

        assert response.status_code == 201
        film_id = response.json()["id"]
        assert response.headers["Location"] == f"/rest/{film_id}"

    def test_invalid_payload(self, client, film_payload, admin_headers):
        film_payload["imdbId"] = "falsch"
        film_payload["bewertung"] = 9

        response = client.post("/rest", json=film_payload, headers=admin_headers)

        assert response.status_code == 400
        fields = {v["field"] for v in response.json()["violations"]}
        assert fields == {"imdbId", "bewertung"}

    def test_duplicate_imdb_id(self, client, film_payload, admin_headers):
        _create(client, film_payload, admin_headers)

        response = client.post("/rest", json=film_payload, headers=admin_headers)

        assert response.status_code == 422
        assert "tt0245429" in response.json()["message"]

    def test_without_token(self, client, film_payload):
        response = client.post("/rest", json=film_payload)

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_unknown_token(self, client, film_payload):
        response = client.post(
            "/rest", json=film_payload, headers={"Authorization": "Bearer unbekannt"}
        )
        assert response.status_code == 401

    def test_token_without_write_role(self, client, film_payload, gast_headers):
        response = client.post("/rest", json=film_payload, headers=gast_headers)
        assert response.status_code == 403


class TestUpdate:
    """Tests pour PUT /rest/{id}."""

    def test_updated_with_new_etag(self, client, film_payload, admin_headers):
        film_id = _create(client, film_payload, admin_headers)

        response = client.put(
            f"/rest/{film_id}",
            json=_update_payload(film_payload, titel="Neuer Titel"),
            headers={**admin_headers, "If-Match": '"0"'},
        )

        assert response.status_code == 204
        assert response.headers["ETag"] == '"1"'
        film = client.get(f"/rest/{film_id}").json()
        assert film["titel"] == "Neuer Titel"
        assert film["version"] == 1
        # Description et acteurs inchanges
        assert film["beschreibung"]["beschreibung"] == "Ein Maedchen in der Geisterwelt."
        assert len(film["schauspieler"]) == 1

    def test_missing_if_match(self, client, film_payload, admin_headers):
        film_id = _create(client, film_payload, admin_headers)

        response = client.put(
            f"/rest/{film_id}", json=_update_payload(film_payload), headers=admin_headers
        )

        assert response.status_code == 428

    def test_invalid_if_match(self, client, film_payload, admin_headers):
        film_id = _create(client, film_payload, admin_headers)

        response = client.put(
            f"/rest/{film_id}",
            json=_update_payload(film_payload),
            headers={**admin_headers, "If-Match": "0"},
        )

        assert response.status_code == 428

    def test_outdated_version(self, client, film_payload, admin_headers):
        film_id = _create(client, film_payload, admin_headers)
        headers = {**admin_headers, "If-Match": '"0"'}
        client.put(f"/rest/{film_id}", json=_update_payload(film_payload), headers=headers)

        response = client.put(f"/rest/{film_id}", json=_update_payload(film_payload), headers=headers)

        assert response.status_code == 412

    def test_unknown_film(self, client, film_payload, admin_headers):
        response = client.put(
            "/rest/999",
            json=_update_payload(film_payload),
            headers={**admin_headers, "If-Match": '"0"'},
        )
        assert response.status_code == 404

    def test_imdb_id_of_other_film(self, client, film_payload, admin_headers):
        _create(client, film_payload, admin_headers)
        other_id = _create(client, {**film_payload, "imdbId": "tt0102926"}, admin_headers)

        response = client.put(
            f"/rest/{other_id}",
            json=_update_payload(film_payload),
            headers={**admin_headers, "If-Match": '"0"'},
        )

        assert response.status_code == 422

    def test_invalid_payload(self, client, film_payload, admin_headers):
        film_id = _create(client, film_payload, admin_headers)

        response = client.put(
            f"/rest/{film_id}",
            json=_update_payload(film_payload, bewertung=-1),
            headers={**admin_headers, "If-Match": '"0"'},
        )

        assert response.status_code == 400

    def test_without_token(self, client, film_payload):
        response = client.put("/rest/1", json=_update_payload(film_payload), headers={"If-Match": '"0"'})
        assert response.status_code == 401


class TestDelete:
    """Tests pour DELETE /rest/{id}."""

    def test_delete_existing(self, client, film_payload, admin_headers):
        film_id = _create(client, film_payload, admin_headers)

        response = client.delete(f"/rest/{film_id}", headers=admin_headers)

        assert response.status_code == 204
        assert client.get(f"/rest/{film_id}").status_code == 404

    def test_delete_unknown_is_no_content(self, client, admin_headers):
        assert client.delete("/rest/999", headers=admin_headers).status_code == 204

    def test_user_may_not_delete(self, client, film_payload, admin_headers, user_headers):
        film_id = _create(client, film_payload, admin_headers)

        response = client.delete(f"/rest/{film_id}", headers=user_headers)

        assert response.status_code == 403
        assert client.get(f"/rest/{film_id}").status_code == 200

    def test_without_token(self, client):
        assert client.delete("/rest/1").status_code == 401
