"""Pytest configuration and fixtures"""
import os

import pytest

# Set test environment variables
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test_key")
os.environ.setdefault("UPSTASH_REDIS_REST_URL", "https://test.upstash.io")
os.environ.setdefault("UPSTASH_REDIS_REST_TOKEN", "test_token")
os.environ.setdefault("ADMIN_PASSWORD", "test-admin-password")
os.environ.setdefault("PAYMENT_DELAY_SECONDS", "0")

from core.auth import InMemoryAdminSessionStore, set_admin_session_store  # noqa: E402
from core.cart import CartStore, InMemoryCartStorage, set_cart_storage  # noqa: E402
from core.payments import SimulatedPaymentGateway, set_payment_gateway  # noqa: E402
from core.services.database import Database, set_database  # noqa: E402
from core.services.models import Product  # noqa: E402
from tests.fakes import FakeSupabaseClient, make_product  # noqa: E402


# ==================== DATA ====================

@pytest.fixture
def product_rows():
    """Rows of the products table, oldest first."""
    return [
        {
            "id": "bench-press",
            "name": "Olympic Bench Press",
            "category": "chest",
            "price": 20000,
            "original_price": 30000,
            "image": "https://test.supabase.co/storage/v1/object/public/product-images/products/bench.jpg",
            "description": "Flat bench with rack",
            "featured": True,
            "created_at": "2024-12-01T00:00:00+00:00",
        },
        {
            "id": "treadmill-pro",
            "name": "Treadmill Pro",
            "category": "cardio",
            "price": 85000,
            "original_price": 90000,
            "image": "https://cdn.example.com/treadmill.jpg",
            "description": "Commercial treadmill",
            "featured": False,
            "created_at": "2024-12-02T00:00:00+00:00",
        },
        {
            "id": "lat-pulldown",
            "name": "Lat Pulldown Machine",
            "category": "back",
            "price": 45000,
            "original_price": None,
            "image": "",
            "description": "Selectorized lat pulldown",
            "featured": True,
            "created_at": "2024-12-03T00:00:00+00:00",
        },
        {
            "id": "cable-crossover",
            "name": "Cable Crossover",
            "category": "chest",
            "price": 120000,
            "original_price": 150000,
            "image": "",
            "description": "Dual pulley station",
            "featured": False,
            "created_at": "2024-12-04T00:00:00+00:00",
        },
    ]


@pytest.fixture
def category_rows():
    return [
        {"id": "chest", "name": "Chest", "description": "Chest machines", "image": None, "display_order": 1},
        {"id": "back", "name": "Back", "description": "Back machines", "image": "https://cdn.example.com/back.jpg", "display_order": 2},
        {"id": "cardio", "name": "Cardio", "description": "Cardio", "image": None, "display_order": 3},
    ]


@pytest.fixture
def sample_product() -> Product:
    return make_product()


# ==================== FIXTURES ====================

@pytest.fixture
def fake_client(product_rows, category_rows) -> FakeSupabaseClient:
    return FakeSupabaseClient({
        "products": product_rows,
        "categories": category_rows,
        "about_content": [{"id": "about-1", "title": "About Us", "content": "Gym equipment since 2010"}],
    })


@pytest.fixture
def db(fake_client) -> Database:
    return Database(fake_client)


@pytest.fixture
def cart_storage():
    """In-memory cart storage installed as the process-wide default."""
    storage = InMemoryCartStorage()
    set_cart_storage(storage)
    yield storage
    set_cart_storage(None)


@pytest.fixture
def cart_store(cart_storage) -> CartStore:
    return CartStore("session-123", cart_storage)


@pytest.fixture
def admin_store():
    store = InMemoryAdminSessionStore()
    set_admin_session_store(store)
    yield store
    set_admin_session_store(None)


@pytest.fixture
def app_env(db, cart_storage, admin_store):
    """Wire fakes into the module singletons used by the HTTP layer."""
    set_database(db)
    set_payment_gateway(SimulatedPaymentGateway(delay_seconds=0))
    yield db
    set_database(None)
    set_payment_gateway(None)
