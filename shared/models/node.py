"""Node-parameter resolution for the executing node."""

from typing import Any

from shared.models.errors import NodeOperationError
from shared.models.node_details import NodeDetails

_MISSING = object()


class NodeContext:
    """Resolves named configuration values for the currently executing node."""

    def __init__(self, node: NodeDetails, parameters: dict[str, Any] | None = None):
        self._node = node
        self._parameters: dict[str, Any] = dict(parameters or {})

    def get_node(self) -> NodeDetails:
        """
        Returns the identity of the executing node.
        """
        return self._node

    def get_node_parameter(self, name: str, default: Any = _MISSING) -> Any:
        """
        Returns the value of a node parameter.

        Args:
            name (str): The parameter name (e.g. "returnAll", "apiVersion").
            default (Any): Fallback value if the parameter is not set.

        Returns:
            Any: The configured value, or the default.

        Raises:
            NodeOperationError: If the parameter is not set and no default is given.
        """
        if name in self._parameters:
            return self._parameters[name]
        if default is _MISSING:
            raise NodeOperationError(self._node, f"Could not get parameter '{name}'")
        return default
