"""Tests for the FastAPI server."""


class TestEndpoints:
    """Tests for plain HTTP endpoints."""

    def test_root(self, http_client):
        response = http_client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "running"

    def test_health(self, http_client):
        response = http_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_cors_allows_dashboard_origin(self, http_client):
        response = http_client.options(
            "/graphql",
            headers={
                "Origin": "http://localhost:5173",
                "Access-Control-Request-Method": "POST",
            },
        )

        assert response.headers["access-control-allow-origin"] == "http://localhost:5173"


class TestGraphQLEndpoint:
    """Tests for POST /graphql."""

    def test_query(self, http_client):
        response = http_client.post("/graphql", json={"query": "{ warehouses { code } }"})

        assert response.status_code == 200
        assert [w["code"] for w in response.json()["data"]["warehouses"]] == [
            "BLR-A", "PNQ-C", "DEL-B", "MUM-D"
        ]

    def test_mutation_with_variables(self, http_client, app):
        response = http_client.post("/graphql", json={
            "query": "mutation U($id: ID!, $demand: Int!) { updateDemand(id: $id, demand: $demand) { demand } }",
            "variables": {"id": "P-1002", "demand": 80},
            "operationName": "U",
        })

        assert response.json() == {"data": {"updateDemand": {"demand": 80}}}
        assert app.state.store.get_product("P-1002").demand == 80

    def test_syntax_error(self, http_client):
        response = http_client.post("/graphql", json={"query": "{ warehouses { code "})

        assert response.status_code == 400
        assert response.json()["errors"]

    def test_unknown_field(self, http_client):
        response = http_client.post("/graphql", json={"query": "{ suppliers { id } }"})

        assert response.status_code == 400

    def test_missing_query(self, http_client):
        response = http_client.post("/graphql", json={})

        assert response.status_code == 422

    def test_resolver_error_reported(self, http_client):
        response = http_client.post("/graphql", json={"query": '{ kpis(range: "1y") { date } }'})

        assert response.json()["errors"][0]["message"].startswith("Unknown range")
