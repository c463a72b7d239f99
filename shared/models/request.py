"""Request and output item models shared by all node clients."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RequestOptions(BaseModel):
    """
    Describes one API request. Instances are frozen: every change derives a new
    request, so a paginator never mutates the request it was given.

    Attributes:
        method (str): HTTP method.
        endpoint (str): Path appended to the client's base URL.
        uri (str | None): Full URI; overrides base URL and endpoint when set.
        body (Any): JSON body. Empty bodies are not sent.
        qs (dict): Query parameters. None values are not sent.
        headers (dict): Extra request headers.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    method: str = "GET"
    endpoint: str = ""
    uri: str | None = None
    body: Any = None
    qs: dict[str, Any] = Field(default_factory=dict)
    headers: dict[str, str] = Field(default_factory=dict)

    def with_query(self, **params: Any) -> "RequestOptions":
        """Return a copy with the given query parameters set."""
        return self.model_copy(update={"qs": {**self.qs, **params}})

    def with_body(self, body: Any) -> "RequestOptions":
        """Return a copy with the body replaced."""
        return self.model_copy(update={"body": body})

    def with_options(self, overrides: dict[str, Any] | None) -> "RequestOptions":
        """Return a copy with the given fields overridden (later values win).

        Raises:
            pydantic.ValidationError: If an override names a field RequestOptions does not have.
        """
        if not overrides:
            return self
        return RequestOptions.model_validate({**self.model_dump(), **overrides})


class NodeExecutionData(BaseModel):
    """
    A single output item of a node execution. Serialises as {"json": {...}}.
    """

    model_config = ConfigDict(populate_by_name=True)

    json_data: dict[str, Any] = Field(default_factory=dict, alias="json")

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
