"""
Pytest configuration and shared fixtures.
"""
import pytest
from httpx import AsyncClient, ASGITransport

from trade_logger.api.main import app, get_journal
from trade_logger.core.entities.trade import TradeForm
from trade_logger.core.services import JournalService
from trade_logger.infrastructure.storage.memory_store import InMemoryTradeStore


@pytest.fixture
def store():
    return InMemoryTradeStore()


@pytest.fixture
def journal(store):
    service = JournalService(store, starting_capital=100000.0)
    service.load()
    return service


@pytest.fixture
def form():
    return TradeForm(symbol="INFY", entry="100", exit="110", qty="50", date="2024-03-01",
                     strategy="Breakout", notes="")


@pytest.fixture
async def client(journal):
    """Async HTTP client for testing FastAPI endpoints against an in-memory journal."""
    app.dependency_overrides[get_journal] = lambda: journal
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
