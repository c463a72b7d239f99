"""Node error types: every error carries the identity of the node that raised it."""

import httpx

from shared.models.node_details import NodeDetails


class NodeError(Exception):
    """Base class for errors raised on behalf of an executing node.

    Attributes:
        node (NodeDetails): The node that was executing when the error occurred.
        message (str): Human-readable error message.
        description (str | None): Optional additional detail (e.g. the response body).
    """

    def __init__(self, node: NodeDetails, message: str, description: str | None = None):
        super().__init__(message)
        self.node = node
        self.message = message
        self.description = description

    def __str__(self) -> str:
        return f"[{self.node.name}] {self.message}"


class NodeApiError(NodeError):
    """Raised when a request to the upstream API fails.

    Wraps the original exception. If the cause is an httpx.HTTPStatusError the
    status code and the response text are kept for upstream reporting.
    """

    def __init__(self, node: NodeDetails, cause: Exception, message: str | None = None):
        self.cause = cause
        self.http_code: int | None = None
        description = None
        if isinstance(cause, httpx.HTTPStatusError):
            self.http_code = cause.response.status_code
            description = cause.response.text
        if message is None:
            if self.http_code is not None:
                message = f"The service returned HTTP {self.http_code}"
            else:
                message = f"The service request failed: {cause}"
        super().__init__(node=node, message=message, description=description)


class NodeOperationError(NodeError):
    """Raised when the node's own input is invalid (e.g. a parameter that is not valid JSON)."""
