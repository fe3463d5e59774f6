"""Shared pytest fixtures: in-memory database, fake image lookup, controller."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from config.database import init_db
from config.settings import Settings
from controllers.shopping_controller import ShoppingController
from models.items import Item
from services.shopping_list_service import ShoppingListService
from tests.helpers import FakeImageSearch, millis


@pytest.fixture
def engine():
    """In-memory SQLite shared across sessions."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autoflush=False, bind=engine)


@pytest.fixture
def settings():
    return Settings(_env_file=None, display_timezone="UTC")


@pytest.fixture
def image_search():
    return FakeImageSearch(url="https://img.example/milk.png")


@pytest.fixture
def service(session_factory, image_search):
    return ShoppingListService(session_factory=session_factory, image_search=image_search)


@pytest.fixture
def controller(service, settings):
    """Controller over a plain dict standing in for st.session_state."""
    return ShoppingController(state={}, service=service, settings=settings)


@pytest.fixture
def sample_items():
    return [
        Item(name="Milk", amount=50, image_url=None, date_added=millis(2026, 10, 19, 9)),
        Item(name="Bread", amount=40, image_url="https://img.example/bread.png",
             date_added=millis(2026, 10, 18, 20)),
        Item(name="Eggs", amount=70, image_url=None, date_added=millis(2026, 10, 19, 18)),
    ]
