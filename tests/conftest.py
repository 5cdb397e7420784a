import logging
from datetime import date
from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from fintrack.api.main import create_app
from fintrack.common.config import Settings


@pytest.fixture
def today():
    """Pinned 'now' for rows without a usable date."""
    return date(2024, 3, 1)


@pytest.fixture
def settings():
    return Settings(log_file=None, seed_sample_data=True, cors_origins=["*"])


@pytest.fixture
def first_receipt_rng():
    """Random source that always picks the first canned receipt."""
    rng = Mock()
    rng.choice.side_effect = lambda seq: seq[0]
    return rng


@pytest.fixture
def app(settings):
    return create_app(settings, configure_logging=False)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def restore_root_logger():
    """setup_logging replaces root handlers; put the originals back afterwards."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
