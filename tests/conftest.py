import sys, pathlib

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

import pytest

from tool_rental import create_app
from tool_rental.config import TestConfig
from tool_rental.models.store import Store


@pytest.fixture
def store():
    """A fresh in-memory store per test."""
    return Store()


@pytest.fixture
def app(store):
    """
    App built around the test's store, so service calls made inside the
    app context and HTTP requests see the SAME rows the test seeds.
    """
    app = create_app(TestConfig, store=store)
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    with app.test_client() as c:
        yield c


@pytest.fixture
def tools(store):
    from tool_rental.services.tool_service import ToolService
    return ToolService(store)


@pytest.fixture
def rentals(store, tools):
    from tool_rental.services.rental_service import RentalService
    return RentalService(store, tools=tools)


@pytest.fixture
def sample_catalog(tools):
    """The three tools the app ships with, keyed by name."""
    return {
        t.name: t
        for t in (
            tools.create_tool("Power Drill", "Professional grade power drill", "25.00"),
            tools.create_tool("Lawn Mower", "Gas-powered lawn mower", "45.00"),
            tools.create_tool("Pressure Washer", "High-pressure water cleaner", "35.00"),
        )
    }
