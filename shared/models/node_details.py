"""Identity of an executing node."""

from pydantic import BaseModel


class NodeDetails(BaseModel):
    """
    Identity of the node instance that is currently executing.

    Attributes:
        name (str): Display name of the node in its workflow (e.g. "Google Analytics").
        type (str): Node type identifier (e.g. "googleAnalytics").
        type_version (int): Version of the node type.
    """

    name: str
    type: str
    type_version: int = 1
