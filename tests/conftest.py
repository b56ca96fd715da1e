import sys
import pathlib
from datetime import datetime

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# ensure project root is on PYTHONPATH for test runs
ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from smartdate.main import app


# Sunday, 7 Dec 2025 at noon. Every parsing test pins "now" so results do not
# depend on the wall clock of the machine running the suite.
FIXED_NOW = datetime(2025, 12, 7, 12, 0, 0)


@pytest.fixture
def fixed_now():
    """The reference time shared by parser and formatter tests."""
    return FIXED_NOW


@pytest.fixture
def restore_config():
    """Snapshot smartdate.config and restore it after the test.

    Tests can mutate config attributes (DATE_FORMAT, TIME_FORMAT, ...) freely
    when they include this fixture.
    """
    from smartdate import config
    saved = {k: getattr(config, k) for k in ('DATE_FORMAT', 'TIME_FORMAT', 'MAX_INPUT_LENGTH', 'DEV_MODE')}
    try:
        yield config
    finally:
        for k, v in saved.items():
            setattr(config, k, v)


@pytest_asyncio.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
