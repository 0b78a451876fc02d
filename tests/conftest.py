"""Test configuration and fixtures for GroceryStore."""
import pytest

from grocerystore.db.session import create_db_engine
from grocerystore.services.inventory_store import InventoryStore
from grocerystore.storage import JsonFileStorage, MemoryStorage, SqliteStorage

STORAGE_KEY = "groceryInventory"


@pytest.fixture
def engine():
    """Create an in-memory test database engine."""
    test_engine = create_db_engine("sqlite:///:memory:", echo=False)
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def memory_storage():
    """Create an empty in-memory storage."""
    return MemoryStorage()


@pytest.fixture
def json_storage(tmp_path):
    """Create a JSON file storage in a temp directory."""
    return JsonFileStorage(tmp_path / "local_storage.json")


@pytest.fixture
def sqlite_storage(engine):
    """Create a SQLite storage on the in-memory engine."""
    return SqliteStorage(engine)


@pytest.fixture(params=["memory", "json", "sqlite"])
def storage(request):
    """Each storage backend in turn."""
    return request.getfixturevalue(f"{request.param}_storage")


@pytest.fixture
def store(memory_storage):
    """Create a loaded inventory store over memory storage."""
    store = InventoryStore(memory_storage, key=STORAGE_KEY)
    store.load()
    return store


@pytest.fixture
def make_record():
    """Build form data the way the add product form submits it."""
    def _make(product_id="P1", **overrides):
        record = {
            "productId": product_id,
            "category": "Fruits",
            "productName": "Apple",
            "quantity": "10",
            "mrp": "50",
            "sellingPrice": "45",
        }
        record.update(overrides)
        return record
    return _make


@pytest.fixture
def apple_record(make_record):
    """The apple record from the walkthrough scenario."""
    return make_record()
