"""Pre-send actions that prepare a request from node parameters."""

import json
from typing import Callable

from shared.models.errors import NodeOperationError
from shared.models.node import NodeContext
from shared.models.request import RequestOptions

PreSendAction = Callable[[NodeContext, RequestOptions], RequestOptions]


def parse_and_set_body_json(parameter_name: str, set_as_body_property: str | None = None) -> PreSendAction:
    """Build a pre-send action that parses a node parameter as JSON and puts it into the body.

    Parameters of type json are plain strings until parsed, and some endpoints
    (e.g. creating credentials) only accept the data as a nested object.

    Args:
        parameter_name (str): The node parameter holding the JSON string.
        set_as_body_property (str | None): Body property to set. None replaces the whole body.

    Returns:
        PreSendAction: Returns a new RequestOptions carrying the parsed body.
    """

    def action(node_context: NodeContext, request_options: RequestOptions) -> RequestOptions:
        raw_data = node_context.get_node_parameter(parameter_name, "{}")
        try:
            parsed = json.loads(raw_data)
        except (TypeError, ValueError) as e:
            raise NodeOperationError(
                node_context.get_node(),
                f"The '{parameter_name}' property must be valid JSON, but cannot be parsed: {e}",
            ) from e

        if set_as_body_property is None:
            return request_options.with_body(parsed)
        return request_options.with_body({**(request_options.body or {}), set_as_body_property: parsed})

    return action
