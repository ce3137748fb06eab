"""
Pytest configuration and fixtures
"""
import pytest
from fastapi.testclient import TestClient

from faq_service.config import Settings
from faq_service.database import create_db_engine
from faq_service.main import create_app
from faq_service.services.faq_store import FAQStore


@pytest.fixture
def test_engine(tmp_path):
    """Create test database engine on a throwaway file"""
    engine = create_db_engine(f"sqlite:///{tmp_path / 'faq.db'}")
    yield engine
    engine.dispose()


@pytest.fixture
def store(test_engine):
    """Storage handle with the faq table in place"""
    faq_store = FAQStore(test_engine)
    faq_store.ensure_schema()
    return faq_store


@pytest.fixture
def test_settings(tmp_path):
    """Settings isolated from the developer's environment"""
    return Settings(
        log_level="WARNING",
        log_file="",
        index_file=str(tmp_path / "index.html"),
        startup_self_test=True,
        expose_error_details=True,
        enable_debug_routes=True,
    )


@pytest.fixture
def app(test_settings, store):
    return create_app(test_settings, store)


@pytest.fixture
def client(app):
    """Create test client with startup/shutdown hooks running"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_faq(store):
    """Create sample FAQ"""
    timestamp = "2024-01-01T09:00:00.000Z"
    faq_id = store.insert(
        "What are your hours?",
        "We are open Monday-Friday 9AM-5PM",
        "Hours,General",
        timestamp,
        timestamp,
    )
    return store.get_by_id(faq_id)


# Test markers
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
