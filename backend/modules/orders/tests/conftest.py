import pytest

from modules.catalog.tests.factories import ItemFactory, ItemTypeFactory
from modules.orders.schemas.order_schemas import OrderCreate
from modules.orders.services.order_service import OrderService


@pytest.fixture
def coffee_type(db_session):
    return ItemTypeFactory(name="coffee", display_name="Coffee")


@pytest.fixture
def milk_type(db_session):
    return ItemTypeFactory(name="milk", display_name="Milk")


@pytest.fixture
def latte(coffee_type):
    return ItemFactory(name="Latte", price=450, item_type=coffee_type)


@pytest.fixture
def espresso(coffee_type):
    return ItemFactory(name="Espresso", price=300, item_type=coffee_type)


@pytest.fixture
def steamed_milk(milk_type):
    return ItemFactory(name="Steamed milk", price=100, item_type=milk_type)


@pytest.fixture
def order_service(store):
    return OrderService(store)


@pytest.fixture
def sample_order(order_service, latte, espresso):
    """An order for two lattes and an espresso."""
    return order_service.create_order(
        OrderCreate(
            order_number=1,
            billing_amount=1200,
            received_amount=1500,
            item_ids=[latte.id, latte.id, espresso.id],
        )
    )
