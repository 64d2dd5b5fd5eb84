from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy.orm import sessionmaker

from shop_analytics.database import build_engine, init_db
from shop_analytics.exceptions import ReferentialIntegrityError, InsufficientStockError
from shop_analytics.models import Customer, Order, OrderItem, Product
from shop_analytics.repositories.order_repository import OrderRepository
from shop_analytics.schemas.order import OrderCreate, OrderItemCreate
from shop_analytics.services.order_service import OrderService
from shop_analytics.services.product_service import ProductService


@pytest.fixture
def service(db):
    return OrderService(db)


def test_place_order_computes_total_from_items(service, add_customer, add_product):
    customer = add_customer()
    laptop = add_product("Laptop", price="799.99", stock_quantity=5)
    mouse = add_product("Mouse", price="19.99", stock_quantity=10)

    order = service.place_order(OrderCreate(
        customer_id=customer.id,
        order_date=date(2024, 2, 1),
        items=[
            OrderItemCreate(product_id=laptop.id, quantity=1),
            OrderItemCreate(product_id=mouse.id, quantity=2, item_price=Decimal("15.00")),
        ]
    ))

    assert order.total_amount == Decimal("829.99")
    assert [(i.product_id, i.quantity, i.item_price) for i in order.items] == [
        (laptop.id, 1, Decimal("799.99")),
        (mouse.id, 2, Decimal("15.00")),
    ]
    assert order.total_amount == sum(i.item_price * i.quantity for i in order.items)


def test_place_order_decrements_stock(db, service, add_customer, add_product):
    customer = add_customer()
    product = add_product(stock_quantity=5)

    service.place_order(OrderCreate(
        customer_id=customer.id,
        items=[
            OrderItemCreate(product_id=product.id, quantity=2),
            OrderItemCreate(product_id=product.id, quantity=1),
        ]
    ))

    db.refresh(product)
    assert product.stock_quantity == 2


def test_place_order_rejects_unknown_customer(db, service, add_product):
    product = add_product()

    with pytest.raises(ReferentialIntegrityError):
        service.place_order(OrderCreate(
            customer_id=999,
            items=[OrderItemCreate(product_id=product.id, quantity=1)]
        ))

    assert db.query(Order).count() == 0


def test_place_order_rejects_unknown_product(db, service, add_customer, add_product):
    customer = add_customer()
    product = add_product()

    with pytest.raises(ReferentialIntegrityError, match="999"):
        service.place_order(OrderCreate(
            customer_id=customer.id,
            items=[
                OrderItemCreate(product_id=product.id, quantity=1),
                OrderItemCreate(product_id=999, quantity=1),
            ]
        ))

    assert db.query(Order).count() == 0
    assert db.query(OrderItem).count() == 0


def test_place_order_insufficient_stock_writes_nothing(db, service, add_customer, add_product):
    customer = add_customer()
    plenty = add_product("Plenty", stock_quantity=100)
    scarce = add_product("Scarce", stock_quantity=1)

    with pytest.raises(InsufficientStockError):
        service.place_order(OrderCreate(
            customer_id=customer.id,
            items=[
                OrderItemCreate(product_id=plenty.id, quantity=3),
                OrderItemCreate(product_id=scarce.id, quantity=2),
            ]
        ))

    assert db.query(Order).count() == 0
    db.refresh(plenty)
    assert plenty.stock_quantity == 100


def test_database_rejects_order_for_unknown_customer(db):
    repository = OrderRepository(db)

    with pytest.raises(ReferentialIntegrityError):
        repository.create_with_items(customer_id=12345, order_date=date(2024, 1, 1), lines=[])

    assert db.query(Order).count() == 0


def test_delete_order_cascades_to_items(db, service, add_customer, add_product, add_order):
    customer = add_customer()
    product = add_product()
    order = add_order(customer, [(product, 1, "10.00"), (product, 2, "10.00")])

    assert service.delete_order(order.id) is True

    assert db.query(Order).count() == 0
    assert db.query(OrderItem).count() == 0
    assert db.query(Product).count() == 1


def test_delete_missing_order(service):
    assert service.delete_order(42) is False


def test_get_orders_by_customer(service, add_customer, add_product, add_order):
    alice = add_customer("Alice")
    bob = add_customer("Bob")
    product = add_product()
    add_order(alice, [(product, 1, "10.00")], order_date=date(2024, 1, 1))
    latest = add_order(alice, [(product, 1, "10.00")], order_date=date(2024, 3, 1))
    add_order(bob, [(product, 1, "10.00")])

    orders = service.get_orders_by_customer(alice.id)

    assert len(orders) == 2
    assert orders[0].id == latest.id


@pytest.fixture
def file_sessions(tmp_path):
    """Independent sessions on one file-backed database, like two API workers"""
    engine = build_engine(f"sqlite:///{tmp_path / 'shop.db'}")
    init_db(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    opened = []

    def _open():
        session = factory()
        opened.append(session)
        return session

    yield _open
    for session in opened:
        session.close()
    engine.dispose()


def _seed(session, stock_quantity):
    customer = Customer(name="Alice", join_date=date(2023, 1, 1))
    product = Product(name="Laptop", category="Electronics", price=Decimal("799.99"), stock_quantity=stock_quantity)
    session.add_all([customer, product])
    session.commit()
    return customer.id, product.id


def test_concurrent_checkouts_cannot_oversell(file_sessions):
    customer_id, product_id = _seed(file_sessions(), stock_quantity=5)
    first, second = file_sessions(), file_sessions()

    # Both workers have seen 5 units before either checks out
    assert first.get(Product, product_id).stock_quantity == 5
    assert second.get(Product, product_id).stock_quantity == 5

    order = OrderCreate(customer_id=customer_id, items=[OrderItemCreate(product_id=product_id, quantity=3)])
    OrderService(first).place_order(order)
    with pytest.raises(InsufficientStockError):
        OrderService(second).place_order(order)

    check = file_sessions()
    sold = sum(item.quantity for item in check.query(OrderItem).all())
    remaining = check.get(Product, product_id).stock_quantity
    assert (sold, remaining) == (3, 2)
    assert check.query(Order).count() == 1


def test_stale_stock_read_does_not_oversell(file_sessions):
    customer_id, product_id = _seed(file_sessions(), stock_quantity=5)
    stale, other = file_sessions(), file_sessions()
    product = stale.get(Product, product_id)

    ProductService(other).update_stock(product_id, -4)

    # stale still believes 5 units are on hand
    assert product.stock_quantity == 5
    with pytest.raises(InsufficientStockError):
        OrderRepository(stale).create_with_items(
            customer_id=customer_id,
            order_date=date(2024, 1, 1),
            lines=[(product, 3, Decimal("799.99"))]
        )

    check = file_sessions()
    assert check.get(Product, product_id).stock_quantity == 1
    assert check.query(Order).count() == 0


def test_concurrent_sales_cannot_drive_stock_negative(file_sessions):
    _, product_id = _seed(file_sessions(), stock_quantity=5)
    first, second = file_sessions(), file_sessions()
    assert first.get(Product, product_id).stock_quantity == 5
    assert second.get(Product, product_id).stock_quantity == 5

    ProductService(first).update_stock(product_id, -3)
    with pytest.raises(InsufficientStockError):
        ProductService(second).update_stock(product_id, -3)

    assert file_sessions().get(Product, product_id).stock_quantity == 2
