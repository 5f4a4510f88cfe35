import pytest
from loguru import logger

from magnet_url import Magnet

from sample_links import DEVUAN_URI, SINTEL_HASH, SINTEL_TRACKERS, SINTEL_URI


@pytest.fixture
def sintel_uri():
    return SINTEL_URI


@pytest.fixture
def sintel_hash():
    return SINTEL_HASH


@pytest.fixture
def sintel_trackers():
    return list(SINTEL_TRACKERS)


@pytest.fixture
def devuan_uri():
    return DEVUAN_URI


@pytest.fixture
def full_magnet():
    """A record with every field set and more than one tracker."""
    return Magnet(
        display_name="Test",
        hash_type="btih",
        hash="1234567890abcdef1234567890abcdef12345678",
        length=12345,
        source="https://example.com/source",
        trackers=[
            "udp://tracker1.example.com:6969",
            "udp://tracker2.example.com:6969",
        ],
        search_keywords="test+keywords",
        web_seed="https://example.com/seed",
        acceptable_source="https://example.com/download",
        manifest="https://example.com/manifest",
    )


@pytest.fixture
def captured_logs():
    """Collect messages logged by the package while a test runs."""
    messages = []
    logger.enable("magnet_url")
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)
    logger.disable("magnet_url")
