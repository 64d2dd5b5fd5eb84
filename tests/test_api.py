from decimal import Decimal

import pytest

from shop_analytics.exceptions import ReferentialIntegrityError
from shop_analytics.models import OrderItem
from shop_analytics.repositories.customer_repository import CustomerRepository
from shop_analytics.repositories.employee_repository import EmployeeRepository
from shop_analytics.repositories.product_repository import ProductRepository


def _create_customer(client, name="Alice", join_date="2023-05-01"):
    response = client.post("/customers", json={"name": name, "contact": f"{name.lower()}@example.com", "join_date": join_date})
    assert response.status_code == 201
    return response.json()


def _create_product(client, name="Laptop", category="Electronics", price="799.99", stock_quantity=10):
    response = client.post(
        "/products",
        json={"name": name, "category": category, "price": price, "stock_quantity": stock_quantity}
    )
    assert response.status_code == 201
    return response.json()


class TestHealth:
    def test_health_reports_complete_schema(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "reachable"
        assert body["missing_tables"] == []

    def test_health_reports_missing_table(self, engine, client):
        OrderItem.__table__.drop(engine)

        response = client.get("/health")

        assert response.status_code == 503
        assert response.json()["missing_tables"] == ["order_items"]

    def test_health_when_database_unreachable(self, unreachable_client):
        response = unreachable_client.get("/health")

        assert response.status_code == 503
        assert response.json()["database"].startswith("unavailable")

    def test_root(self, client):
        assert client.get("/").json()["service"] == "shop-analytics-service"


class TestOrders:
    def test_place_order(self, client):
        customer = _create_customer(client)
        product = _create_product(client, stock_quantity=3)

        response = client.post("/orders", json={
            "customer_id": customer["id"],
            "order_date": "2024-02-01",
            "items": [{"product_id": product["id"], "quantity": 2}]
        })

        assert response.status_code == 201
        body = response.json()
        assert Decimal(body["total_amount"]) == Decimal("1599.98")
        assert len(body["items"]) == 1
        assert client.get(f"/products/{product['id']}").json()["stock_quantity"] == 1

    def test_order_for_unknown_customer_conflicts(self, client):
        product = _create_product(client)

        response = client.post("/orders", json={
            "customer_id": 404,
            "items": [{"product_id": product["id"], "quantity": 1}]
        })

        assert response.status_code == 409

    def test_order_over_stock_conflicts(self, client):
        customer = _create_customer(client)
        product = _create_product(client, stock_quantity=1)

        response = client.post("/orders", json={
            "customer_id": customer["id"],
            "items": [{"product_id": product["id"], "quantity": 5}]
        })

        assert response.status_code == 409
        assert "Insufficient stock" in response.json()["detail"]

    def test_order_needs_items(self, client):
        customer = _create_customer(client)

        response = client.post("/orders", json={"customer_id": customer["id"], "items": []})

        assert response.status_code == 422

    def test_zero_quantity_rejected(self, client):
        customer = _create_customer(client)
        product = _create_product(client)

        response = client.post("/orders", json={
            "customer_id": customer["id"],
            "items": [{"product_id": product["id"], "quantity": 0}]
        })

        assert response.status_code == 422

    def test_get_missing_order(self, client):
        assert client.get("/orders/1").status_code == 404

    def test_delete_customer_with_orders_conflicts(self, client):
        customer = _create_customer(client)
        product = _create_product(client)
        client.post("/orders", json={
            "customer_id": customer["id"],
            "items": [{"product_id": product["id"], "quantity": 1}]
        })

        assert client.delete(f"/customers/{customer['id']}").status_code == 409
        assert len(client.get(f"/customers/{customer['id']}/orders").json()) == 1


class TestAnalytics:
    def test_empty_database(self, client):
        assert client.get("/analytics/orders/count").json() == {"count": 0}
        assert Decimal(client.get("/analytics/revenue/total").json()["total_revenue"]) == 0
        assert client.get("/analytics/products/top-revenue").json() == []
        assert client.get("/analytics/customers/without-orders").json() == []

    def test_catalog(self, client):
        alice = _create_customer(client, "Alice", "2023-02-01")
        bob = _create_customer(client, "Bob", "2024-07-15")
        laptop = _create_product(client, "Laptop", price="799.99")
        tablet = _create_product(client, "Tablet", price="799.99")
        _create_product(client, "Chair", category="Furniture", price="120.00")
        client.post("/orders", json={
            "customer_id": alice["id"],
            "items": [
                {"product_id": laptop["id"], "quantity": 1},
                {"product_id": tablet["id"], "quantity": 2, "item_price": "700.00"}
            ]
        })
        client.post("/employees", json={"name": "Ann", "department": "Sales", "salary": "50000.00"})
        client.post("/employees", json={"name": "Ben", "department": "Sales", "salary": "60000.00"})
        client.post("/employees", json={"name": "Cid", "department": "IT", "salary": "70000.00"})

        joined = client.get("/analytics/customers/joined/2023").json()
        assert [c["name"] for c in joined] == ["Alice"]

        electronics = client.get("/analytics/products/category/Electronics").json()
        assert [p["name"] for p in electronics] == ["Laptop", "Tablet"]

        assert client.get("/analytics/orders/count").json() == {"count": 1}

        max_price = client.get("/analytics/products/max-price").json()
        assert sorted(p["name"] for p in max_price) == ["Laptop", "Tablet"]

        total = client.get("/analytics/revenue/total").json()["total_revenue"]
        assert Decimal(total) == Decimal("2199.99")

        top = client.get("/analytics/products/top-revenue", params={"n": 1}).json()
        assert [(p["product_name"], Decimal(p["revenue"])) for p in top] == [("Tablet", Decimal("1400"))]

        without = client.get("/analytics/customers/without-orders").json()
        assert [c["id"] for c in without] == [bob["id"]]

        salaries = client.get("/analytics/employees/average-salary").json()
        assert {s["department"]: Decimal(s["average_salary"]) for s in salaries} == {
            "IT": Decimal("70000"),
            "Sales": Decimal("55000"),
        }

    def test_top_revenue_rejects_zero(self, client):
        assert client.get("/analytics/products/top-revenue", params={"n": 0}).status_code == 422


class TestUnreachableDatabase:
    @pytest.mark.parametrize("method, path, payload", [
        ("get", "/analytics/orders/count", None),
        ("get", "/customers", None),
        ("get", "/customers/1", None),
        ("post", "/customers", {"name": "Alice", "join_date": "2023-05-01"}),
        ("delete", "/customers/1", None),
        ("get", "/products", None),
        ("post", "/products", {"name": "Laptop", "category": "Electronics", "price": "799.99"}),
        ("patch", "/products/1/stock", {"quantity": 1}),
        ("get", "/orders", None),
        ("get", "/orders/1", None),
        ("post", "/orders", {"customer_id": 1, "items": [{"product_id": 1, "quantity": 1}]}),
        ("delete", "/orders/1", None),
        ("get", "/employees", None),
        ("post", "/employees", {"name": "Ann", "department": "Sales", "salary": "50000.00"}),
    ])
    def test_request_answers_503(self, unreachable_client, method, path, payload):
        kwargs = {"json": payload} if payload is not None else {}

        response = unreachable_client.request(method.upper(), path, **kwargs)

        assert response.status_code == 503
        assert "unavailable" in response.json()["detail"]


class TestCreateConflicts:
    @pytest.mark.parametrize("repository, path, payload", [
        (CustomerRepository, "/customers", {"name": "Alice", "join_date": "2023-05-01"}),
        (ProductRepository, "/products", {"name": "Laptop", "category": "Electronics", "price": "799.99"}),
        (EmployeeRepository, "/employees", {"name": "Ann", "department": "Sales", "salary": "50000.00"}),
    ])
    def test_database_rejection_answers_409(self, client, monkeypatch, repository, path, payload):
        def reject(self, data):
            raise ReferentialIntegrityError("constraint failed")

        monkeypatch.setattr(repository, "create", reject)

        response = client.post(path, json=payload)

        assert response.status_code == 409
        assert response.json()["detail"] == "constraint failed"
