"""HTTP API tests using FastAPI's TestClient and an in-memory store."""

import pytest
from fastapi.testclient import TestClient

from franchises.infrastructure.api.app import create_app
from franchises.infrastructure.config import Settings
from franchises.infrastructure.persistence.in_memory_franchise_repository import (
    InMemoryFranchiseRepository,
)
from tests.fakes import FailingFranchiseRepository, sample_franchise


@pytest.fixture
def repo():
    return InMemoryFranchiseRepository([sample_franchise()])


@pytest.fixture
def client(repo):
    app = create_app(Settings(store="memory"), repository=repo)
    with TestClient(app) as test_client:
        yield test_client


class TestHome:

    def test_welcome(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "Franchises API" in response.json()["message"]

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}


class TestFranchiseEndpoints:

    def test_create(self, client):
        response = client.post(
            "/franchises",
            json={"name": "Taco Town", "branches": [{"name": "North", "products": [{"name": "taco", "stock": 4}]}]},
        )
        assert response.status_code == 201
        body = response.json()
        assert body["id"]
        assert body["branches"][0]["products"][0] == {"name": "taco", "stock": 4, "price": None}

    def test_create_requires_name(self, client):
        assert client.post("/franchises", json={"address": "x"}).status_code == 422

    def test_list(self, client):
        response = client.get("/franchises")
        assert response.status_code == 200
        assert [f["id"] for f in response.json()] == ["f-1"]

    def test_get(self, client):
        body = client.get("/franchises/f-1").json()
        assert body["name"] == "Burger Palace"
        assert [b["name"] for b in body["branches"]] == ["A", "B"]

    def test_get_missing(self, client):
        assert client.get("/franchises/nope").status_code == 404

    def test_delete(self, client, repo):
        assert client.delete("/franchises/f-1").status_code == 204
        assert repo.get_by_id("f-1") is None
        assert client.delete("/franchises/f-1").status_code == 404

    def test_rename(self, client):
        response = client.put("/franchises/f-1/name", params={"newName": "Burger Empire"})
        assert response.status_code == 200
        assert response.json()["name"] == "Burger Empire"

    def test_address_and_description(self, client):
        client.put("/franchises/f-1/address", params={"newAddress": "9 Elm St"})
        body = client.put("/franchises/f-1/description", params={"newDescription": ""}).json()
        assert body["address"] == "9 Elm St"
        assert body["description"] == ""

    def test_edit_missing_franchise(self, client):
        assert client.put("/franchises/nope/name", params={"newName": "X"}).status_code == 404


class TestBranchAndProductEndpoints:

    def test_add_branch(self, client):
        response = client.post("/franchises/f-1/branches", json={"name": "C"})
        assert response.status_code == 200
        assert [b["name"] for b in response.json()["branches"]] == ["A", "B", "C"]

    def test_rename_branch(self, client):
        body = client.put("/franchises/f-1/branches/A/name", params={"newBranchName": "Alpha"}).json()
        assert [b["name"] for b in body["branches"]] == ["Alpha", "B"]

    def test_add_product(self, client):
        response = client.post(
            "/franchises/f-1/branches/A/products",
            json={"name": "p5", "stock": 3, "price": 1.5},
        )
        assert response.status_code == 200
        assert response.json()["branches"][0]["products"][-1]["name"] == "p5"

    def test_add_product_to_missing_branch_is_ok_and_unchanged(self, client):
        before = client.get("/franchises/f-1").json()
        response = client.post("/franchises/f-1/branches/Nowhere/products", json={"name": "p5"})
        assert response.status_code == 200
        assert response.json() == before

    def test_delete_product(self, client):
        body = client.delete("/franchises/f-1/branches/A/products/p1").json()
        assert [p["name"] for p in body["branches"][0]["products"]] == ["p2"]

    def test_modify_stock(self, client):
        body = client.put(
            "/franchises/f-1/branches/A/products/p2/stock", params={"newStock": -4}
        ).json()
        assert body["branches"][0]["products"][1]["stock"] == -4

    def test_modify_stock_rejects_non_integer(self, client):
        response = client.put(
            "/franchises/f-1/branches/A/products/p2/stock", params={"newStock": "many"}
        )
        assert response.status_code == 422

    def test_rename_product(self, client):
        body = client.put(
            "/franchises/f-1/branches/B/products/p3/name", params={"newProductName": "cola"}
        ).json()
        assert body["branches"][1]["products"][0]["name"] == "cola"

    def test_update_price(self, client):
        body = client.put(
            "/franchises/f-1/branches/B/products/p4/price", params={"newPrice": 2.5}
        ).json()
        assert body["branches"][1]["products"][1]["price"] == 2.5

    def test_most_stock_per_branch(self, client):
        response = client.get("/franchises/f-1/products/most-stock-per-branch")
        assert response.status_code == 200
        assert response.json() == [
            {"A": {"name": "p1", "stock": 15, "price": 9.5}},
            {"B": {"name": "p3", "stock": 20, "price": 4.25}},
        ]

    def test_most_stock_missing_franchise(self, client):
        response = client.get("/franchises/nope/products/most-stock-per-branch")
        assert response.status_code == 404


class TestStoreFailure:

    def test_store_error_becomes_500(self):
        app = create_app(Settings(store="memory"), repository=FailingFranchiseRepository())
        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/franchises/f-1")
        assert response.status_code == 500
        assert response.json() == {"detail": "Document store unavailable"}


class TestCors:

    def test_franchise_routes_answer_preflight(self, client):
        response = client.options(
            "/franchises",
            headers={"Origin": "http://shop.example", "Access-Control-Request-Method": "PUT"},
        )
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"
        assert response.headers["access-control-max-age"] == "3600"

    def test_nested_franchise_route_gets_cors_headers(self, client):
        response = client.get("/franchises/f-1", headers={"Origin": "http://shop.example"})
        assert response.headers["access-control-allow-origin"] == "*"

    def test_other_paths_have_no_cors_headers(self, client):
        response = client.get("/health", headers={"Origin": "http://shop.example"})
        assert response.status_code == 200
        assert "access-control-allow-origin" not in response.headers

    def test_configured_origins(self, repo):
        settings = Settings(store="memory", cors_origins="http://a.example,http://b.example")
        with TestClient(create_app(settings, repository=repo)) as client:
            allowed = client.get("/franchises", headers={"Origin": "http://b.example"})
            denied = client.get("/franchises", headers={"Origin": "http://evil.example"})
        assert allowed.headers["access-control-allow-origin"] == "http://b.example"
        assert "access-control-allow-origin" not in denied.headers


class TestOpenApi:

    def test_routes_carry_summaries_and_error_responses(self, client):
        paths = client.get("/openapi.json").json()["paths"]

        operation = paths["/franchises/{franchise_id}/products/most-stock-per-branch"]["get"]
        assert operation["summary"] == "Get product with most stock per branch"
        assert operation["responses"]["404"]["description"] == "Franchise not found"
        assert operation["responses"]["500"]["description"] == "Document store unavailable"

        create = paths["/franchises"]["post"]
        assert create["summary"] == "Create a new franchise"
        assert "404" not in create["responses"]

    def test_every_franchise_route_has_a_summary(self, client):
        paths = client.get("/openapi.json").json()["paths"]
        operations = [
            op for path, methods in paths.items() if path.startswith("/franchises")
            for op in methods.values()
        ]
        assert len(operations) == 15
        assert all(op.get("summary") for op in operations)
