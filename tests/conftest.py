import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_structlog():
    # CLI runs configure structlog against CliRunner's temporary streams.
    yield
    structlog.reset_defaults()
