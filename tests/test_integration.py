"""
Live tests against a Traffic Portal stage. They run only when TP_API_ENDPOINT,
TP_API_KEY and TP_TEST_UID are set.
"""
import os
import time

import pytest

from src.rest.client import TrafficPortalApiClient
from src.rest.exceptions import (
    TrafficPortalAuthenticationError,
    TrafficPortalNetworkError,
    TrafficPortalValidationError,
)
from src.rest.models import CreateMapRequest

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        not (os.environ.get("TP_API_ENDPOINT") and os.environ.get("TP_API_KEY") and os.environ.get("TP_TEST_UID")),
        reason="Set TP_API_ENDPOINT, TP_API_KEY and TP_TEST_UID to run integration tests",
    ),
]

DOMAIN = "dev.trfc.link"


@pytest.fixture
def client():
    return TrafficPortalApiClient(os.environ["TP_API_ENDPOINT"], os.environ["TP_API_KEY"], 30)


@pytest.fixture
def uid():
    return int(os.environ["TP_TEST_UID"])


def test_create_masked_record(client, uid):
    tp_key = f"pytest{int(time.time())}"
    request = CreateMapRequest(
        uid=uid,
        tp_key=tp_key,
        domain=DOMAIN,
        destination="https://example.com",
        tags="test,integration",
        notes="Created by pytest integration test",
    )

    response = client.create_masked_record(request)

    assert response.success is True
    assert response.message == "Record Created"
    assert response.mid is not None
    assert response.tp_key == tp_key
    assert response.domain == DOMAIN
    assert response.destination == "https://example.com"


def test_create_masked_record_with_all_fields(client, uid):
    request = CreateMapRequest(
        uid=uid,
        tp_key=f"fulltest{int(time.time())}",
        domain=DOMAIN,
        destination="https://example.com/full-test",
        status="active",
        type="redirect",
        is_set=0,
        tags="integration,full-test,pytest",
        notes="Full integration test with all fields",
        settings='{"test": true, "version": 1}',
        cache_content=0,
    )

    response = client.create_masked_record(request)

    assert response.success is True
    assert response.mid is not None
    for key in ("tags", "notes", "settings"):
        assert key in response.source


def test_invalid_uid_is_rejected(client):
    request = CreateMapRequest(
        uid=99999,
        tp_key=f"testkey{int(time.time())}",
        domain=DOMAIN,
        destination="https://example.com",
    )

    with pytest.raises(TrafficPortalAuthenticationError) as exc_info:
        client.create_masked_record(request)

    assert exc_info.value.code == 401


def test_duplicate_key_is_rejected(client, uid):
    tp_key = f"duplicate{int(time.time())}"
    first = CreateMapRequest(uid=uid, tp_key=tp_key, domain=DOMAIN, destination="https://example.com")
    assert client.create_masked_record(first).success is True

    second = CreateMapRequest(uid=uid, tp_key=tp_key, domain=DOMAIN, destination="https://example2.com")
    with pytest.raises(TrafficPortalValidationError) as exc_info:
        client.create_masked_record(second)

    assert exc_info.value.code == 400


def test_unknown_host_is_network_error():
    client = TrafficPortalApiClient("https://invalid-endpoint-that-does-not-exist-12345.com/api", "test-key", 5)
    request = CreateMapRequest(uid=1, tp_key="key", domain="test.com", destination="https://example.com")

    with pytest.raises(TrafficPortalNetworkError):
        client.create_masked_record(request)
