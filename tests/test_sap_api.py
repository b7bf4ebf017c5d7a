"""Tests for ancestral path and outcast endpoints."""

import pytest


def _sap(client, a, b):
    return client.get("/api/v1/sap", params={"noun_a": a, "noun_b": b})


# ── Noun paths ────────────────────────────────────────────────────────────────

class TestNounPath:
    def test_siblings(self, loaded_client):
        resp = _sap(loaded_client, "dog", "cat")
        assert resp.status_code == 200
        assert resp.json() == {
            "noun_a": "dog",
            "noun_b": "cat",
            "distance": 2,
            "ancestor_id": 1,
            "ancestor": "animal beast",
        }

    def test_ambiguous_noun(self, loaded_client):
        body = _sap(loaded_client, "tree", "bass").json()
        assert body["distance"] == 1
        assert body["ancestor"] == "tree"

    @pytest.mark.parametrize(
        "a, b, distance, ancestor",
        [
            ("dog", "tree", 4, "entity"),
            ("horse", "animal", 1, "animal beast"),
            ("flora", "basswood", 2, "plant flora"),
            ("cat", "cat", 0, "cat"),
        ],
    )
    def test_pairs(self, loaded_client, a, b, distance, ancestor):
        body = _sap(loaded_client, a, b).json()
        assert body["distance"] == distance
        assert body["ancestor"] == ancestor

    def test_unknown_noun_returns_404(self, loaded_client):
        resp = _sap(loaded_client, "dog", "unicorn")
        assert resp.status_code == 404
        assert "unicorn" in resp.json()["detail"]

    def test_missing_parameter_returns_422(self, loaded_client):
        assert loaded_client.get("/api/v1/sap", params={"noun_a": "dog"}).status_code == 422


# ── Vertex paths ──────────────────────────────────────────────────────────────

class TestVertexPath:
    def test_single_vertices(self, loaded_client):
        resp = loaded_client.get("/api/v1/sap/vertices", params={"v": 3, "w": 4})
        assert resp.status_code == 200
        assert resp.json() == {"v": [3], "w": [4], "length": 2, "ancestor": 1}

    def test_vertex_sets(self, loaded_client):
        resp = loaded_client.get(
            "/api/v1/sap/vertices", params=[("v", 3), ("v", 8), ("w", 6)]
        )
        body = resp.json()
        assert body["length"] == 1
        assert body["ancestor"] == 6

    def test_out_of_range_returns_422(self, loaded_client):
        resp = loaded_client.get("/api/v1/sap/vertices", params={"v": 3, "w": 42})
        assert resp.status_code == 422
        assert "42" in resp.json()["detail"]


# ── Outcast ───────────────────────────────────────────────────────────────────

class TestOutcastEndpoint:
    def test_outcast(self, loaded_client):
        resp = loaded_client.post(
            "/api/v1/outcast", json={"nouns": ["dog", "cat", "horse", "tree"]}
        )
        assert resp.status_code == 200
        assert resp.json() == {"outcast": "tree", "distance_sums": [8, 8, 8, 12]}

    def test_tie_goes_to_first(self, loaded_client):
        body = loaded_client.post(
            "/api/v1/outcast", json={"nouns": ["cat", "horse", "dog"]}
        ).json()
        assert body["outcast"] == "cat"

    def test_unknown_noun_returns_404(self, loaded_client):
        resp = loaded_client.post("/api/v1/outcast", json={"nouns": ["dog", "unicorn"]})
        assert resp.status_code == 404

    def test_empty_list_returns_422(self, loaded_client):
        assert loaded_client.post("/api/v1/outcast", json={"nouns": []}).status_code == 422
