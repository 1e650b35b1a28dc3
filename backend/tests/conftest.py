import itertools
import os
import tempfile

# Must be set before moneywise.config is imported
_db_dir = tempfile.mkdtemp(prefix="moneywise-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_db_dir, 'test.db')}"
os.environ["INSIGHTS_SERVICE_URL"] = ""
os.environ["CORS_ORIGINS"] = "*"

import pytest
from fastapi.testclient import TestClient

from moneywise.main import app
from moneywise.schemas.insights import TransactionIn

_ids = itertools.count(1)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(scope="module")
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_txn():
    """Factory for engine transactions; ``day`` is 'YYYY-MM-DD' or a full ISO datetime."""
    def _make(type_, amount, day, category="Food", description=""):
        return TransactionIn(
            id=f"t{next(_ids)}",
            amount=amount,
            description=description,
            category=category,
            type=type_,
            date=day,
        )
    return _make
