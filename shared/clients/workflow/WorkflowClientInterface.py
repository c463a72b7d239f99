from abc import abstractmethod
from typing import Any

from shared.clients.ClientInterface import ClientInterface
from shared.helper.HelperConfig import HelperConfig
from shared.helper.HelperRequest import parse_and_set_body_json
from shared.models.node import NodeContext
from shared.models.request import NodeExecutionData, RequestOptions
from shared.pagination.CursorPaginator import CursorPaginator


class WorkflowClientInterface(ClientInterface):
    def __init__(self, helper_config: HelperConfig, node_context: NodeContext):
        super().__init__(helper_config=helper_config, node_context=node_context)

    ##########################################
    ################ GETTER ##################
    ##########################################

    ################ GENERAL ##################
    def _get_client_type(self) -> str:
        """
        Returns the type of the client. E.g. "workflow"
        """
        return "workflow"

    ################ ENDPOINTS ##################
    @abstractmethod
    def _get_endpoint_workflows(self) -> str:
        """
        Returns the endpoint path for listing and creating workflows (e.g. "/api/v1/workflows")
        """
        pass

    @abstractmethod
    def _get_endpoint_executions(self) -> str:
        """
        Returns the endpoint path for listing executions (e.g. "/api/v1/executions")
        """
        pass

    @abstractmethod
    def _get_endpoint_credentials(self) -> str:
        """
        Returns the endpoint path for creating credentials (e.g. "/api/v1/credentials")
        """
        pass

    @abstractmethod
    def _get_endpoint_credential_schema(self, credential_type: str) -> str:
        """
        Returns the endpoint path for the data schema of a credential type.

        Args:
            credential_type (str): The credential type name (e.g. "githubApi").
        """
        pass

    ##########################################
    ############### REQUESTS #################
    ##########################################

    async def do_routing_request(self, options: RequestOptions) -> list[dict]:
        """Execute one request and return its response as a list of pages.

        Args:
            options (RequestOptions): The request to execute.

        Returns:
            list[dict]: The response pages. A single JSON object becomes a one-page list.
        """
        response = await self.do_api_request(options)
        if response is None:
            return []
        if isinstance(response, list):
            return response
        return [response]

    async def do_fetch_all(self, endpoint: str, query: dict[str, Any] | None = None) -> list[NodeExecutionData]:
        """Fetch a cursor-paginated listing.

        Follows the cursor until the listing is exhausted if "returnAll" is set,
        otherwise fetches one page of at most "limit" items.

        Args:
            endpoint (str): The listing endpoint.
            query (dict[str, Any] | None): Additional query parameters (filters).

        Returns:
            list[NodeExecutionData]: The listed items.
        """
        qs = dict(query or {})
        if not self._node_context.get_node_parameter("returnAll", True):
            qs["limit"] = self._node_context.get_node_parameter("limit", 100)
        paginator = CursorPaginator(node_context=self._node_context, logger=self.logging)
        return await paginator.paginate(
            RequestOptions(method="GET", endpoint=endpoint, qs=qs),
            self.do_routing_request,
        )

    async def do_fetch_workflows(self, active: bool | None = None, tags: list[str] | None = None) -> list[NodeExecutionData]:
        """Fetch workflows, optionally filtered by active state and tag names."""
        query: dict[str, Any] = {}
        if active is not None:
            query["active"] = "true" if active else "false"
        if tags:
            query["tags"] = ",".join(tags)
        return await self.do_fetch_all(self._get_endpoint_workflows(), query)

    async def do_fetch_executions(
        self,
        workflow_id: str | None = None,
        status: str | None = None,
        include_data: bool = False,
    ) -> list[NodeExecutionData]:
        """Fetch executions, optionally filtered by workflow and status ("error", "success", "waiting")."""
        query: dict[str, Any] = {"includeData": "true" if include_data else "false"}
        if workflow_id:
            query["workflowId"] = workflow_id
        if status:
            query["status"] = status
        return await self.do_fetch_all(self._get_endpoint_executions(), query)

    async def do_fetch_credential_schema(self, credential_type: str) -> dict:
        """Fetch the JSON schema of the data a credential type expects."""
        return await self.do_api_request(
            RequestOptions(method="GET", endpoint=self._get_endpoint_credential_schema(credential_type))
        )

    async def do_create_workflow(self) -> dict:
        """Create a workflow from the JSON in the "workflowObject" node parameter."""
        request = RequestOptions(method="POST", endpoint=self._get_endpoint_workflows())
        request = parse_and_set_body_json("workflowObject")(self._node_context, request)
        return await self.do_api_request(request)

    async def do_create_credential(self) -> dict:
        """Create a credential from the "name", "credentialTypeName" and JSON "data" node parameters."""
        request = RequestOptions(
            method="POST",
            endpoint=self._get_endpoint_credentials(),
            body={
                "name": self._node_context.get_node_parameter("name"),
                "type": self._node_context.get_node_parameter("credentialTypeName"),
            },
        )
        request = parse_and_set_body_json("data", "data")(self._node_context, request)
        return await self.do_api_request(request)
