"""Tests for the GroceryStore logger."""
import pytest
from loguru import logger

from grocerystore.utils.logger import get_logger


@pytest.fixture
def bound_names():
    """Collect the bound name of every record logged during a test."""
    names = []
    handler_id = logger.add(lambda message: names.append(message.record["extra"]["name"]), level="DEBUG")
    yield names
    logger.remove(handler_id)


@pytest.mark.parametrize("name, expected", [
    ("grocerystore.services.inventory_store", "grocerystore.services.inventory_store"),
    ("__main__", "grocerystore.__main__"),
    ("app", "grocerystore.app"),
])
def test_get_logger_binds_prefixed_name(bound_names, name, expected):
    """Test that logger names always carry the package prefix."""
    get_logger(name).info("hello")
    assert bound_names == [expected]
