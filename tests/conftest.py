"""
Shared pytest fixtures for the node API bridge tests.
"""

import json
import logging

import httpx
import pytest

from shared.helper.HelperConfig import HelperConfig
from shared.models.node import NodeContext
from shared.models.node_details import NodeDetails


@pytest.fixture
def logger():
    return logging.getLogger("tests")


@pytest.fixture
def helper_config(logger):
    return HelperConfig(logger=logger)


@pytest.fixture
def node():
    return NodeDetails(name="Test Node", type="testNode")


@pytest.fixture
def make_context(node):
    """Build a NodeContext with the given node parameters."""

    def _make(**parameters):
        return NodeContext(node=node, parameters=parameters)

    return _make


@pytest.fixture
def workflow_env(monkeypatch):
    monkeypatch.setenv("WORKFLOW_N8N_BASE_URL", "http://n8n.test")
    monkeypatch.setenv("WORKFLOW_N8N_API_KEY", "secret-key")


@pytest.fixture
def analytics_env(monkeypatch):
    monkeypatch.setenv("ANALYTICS_GOOGLE_ACCESS_TOKEN", "token-123")


class RecordingTransport:
    """
    Serves queued JSON responses through an httpx.MockTransport and records every request.

    Usage:
        transport = RecordingTransport([{"data": [...]}, (500, {"message": "boom"})])
        await client.boot(transport=transport.mock)
    """

    def __init__(self, responses):
        self._responses = list(responses)
        self.requests: list[httpx.Request] = []
        self.mock = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self._responses.pop(0)
        if isinstance(response, tuple):
            status, payload = response
            return httpx.Response(status, json=payload)
        return httpx.Response(200, json=response)

    def body(self, index: int):
        content = self.requests[index].content
        return json.loads(content) if content else None


@pytest.fixture
def recording_transport():
    return RecordingTransport
