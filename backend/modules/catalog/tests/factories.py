# backend/modules/catalog/tests/factories.py

import factory
from factory import Faker, LazyAttribute, Sequence, SubFactory
from factory.alchemy import SQLAlchemyModelFactory

from modules.catalog.models.catalog_models import Item, ItemType


class BaseFactory(SQLAlchemyModelFactory):
    """Base factory; the session is bound per test in conftest."""

    class Meta:
        abstract = True
        sqlalchemy_session_persistence = "commit"


class ItemTypeFactory(BaseFactory):
    """Factory for creating item types."""

    class Meta:
        model = ItemType

    name = Sequence(lambda n: f"type-{n}")
    display_name = LazyAttribute(lambda o: o.name.title())


class ItemFactory(BaseFactory):
    """Factory for creating menu items."""

    class Meta:
        model = Item

    name = Sequence(lambda n: f"item-{n}")
    abbreviation = LazyAttribute(lambda o: o.name[:3].upper())
    price = Faker("random_int", min=100, max=900, step=10)
    key = factory.Iterator(["1", "2", "3", "q", "w", "e"])
    assignee = None
    item_type = SubFactory(ItemTypeFactory)
