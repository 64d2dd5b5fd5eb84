import os

# Must be set before shop_analytics.config is imported
os.environ["DATABASE_URL"] = "sqlite://"

from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from shop_analytics.database import build_engine, init_db, get_db
from shop_analytics.main import app
from shop_analytics.models import Customer, Product, Order, OrderItem, Employee


@pytest.fixture
def engine():
    engine = build_engine("sqlite://", poolclass=StaticPool)
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def add_customer(db):
    def _add(name="Alice", join_date=date(2023, 3, 15), contact=None):
        customer = Customer(name=name, join_date=join_date, contact=contact)
        db.add(customer)
        db.commit()
        return customer
    return _add


@pytest.fixture
def add_product(db):
    def _add(name="Laptop", category="Electronics", price="799.99", stock_quantity=50):
        product = Product(name=name, category=category, price=Decimal(price), stock_quantity=stock_quantity)
        db.add(product)
        db.commit()
        return product
    return _add


@pytest.fixture
def add_order(db):
    """Insert an order whose total matches its items: items are (product, quantity, item_price)"""
    def _add(customer, items, order_date=date(2024, 1, 10)):
        order = Order(customer_id=customer.id, order_date=order_date)
        total = Decimal("0.00")
        for product, quantity, price in items:
            order.items.append(OrderItem(product_id=product.id, quantity=quantity, item_price=Decimal(price)))
            total += Decimal(price) * quantity
        order.total_amount = total
        db.add(order)
        db.commit()
        return order
    return _add


@pytest.fixture
def add_employee(db):
    def _add(name="Bob", department="Sales", salary="50000.00", hire_date=date(2022, 6, 1)):
        employee = Employee(name=name, department=department, salary=Decimal(salary), hire_date=hire_date)
        db.add(employee)
        db.commit()
        return employee
    return _add


@pytest.fixture
def unreachable_client():
    """TestClient whose sessions point at a database file that cannot be opened"""
    engine = build_engine("sqlite:////nonexistent-directory/shop.db")
    broken_session = sessionmaker(bind=engine)

    def override_get_db():
        session = broken_session()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
    engine.dispose()
