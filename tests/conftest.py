import pytest
from fastapi.testclient import TestClient

from smsledger.api import app
from smsledger.bank.bank_parser_factory import DEFAULT_REGISTRY

TIMESTAMP = 1735700000000


@pytest.fixture
def registry():
    return DEFAULT_REGISTRY


@pytest.fixture
def parse(registry):
    """Parse ``body`` with whichever parser claims ``sender``."""

    def _parse(sender, body, timestamp=TIMESTAMP):
        parser = registry.resolve(sender)
        assert parser is not None, f"no parser for {sender}"
        return parser.parse(body, sender, timestamp)

    return _parse


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
