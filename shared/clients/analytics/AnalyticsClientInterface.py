from abc import abstractmethod
from typing import Any

from shared.clients.ClientInterface import ClientInterface
from shared.helper.HelperAnalytics import merge, process_filters, simplify
from shared.helper.HelperConfig import HelperConfig
from shared.models.node import NodeContext
from shared.models.request import RequestOptions
from shared.pagination.AnalyticsPageAggregator import AnalyticsPageAggregator, PaginationStrategy


class AnalyticsClientInterface(ClientInterface):
    def __init__(self, helper_config: HelperConfig, node_context: NodeContext):
        super().__init__(helper_config=helper_config, node_context=node_context)

    ##########################################
    ################ GETTER ##################
    ##########################################

    ################ GENERAL ##################
    def _get_client_type(self) -> str:
        """
        Returns the type of the client. E.g. "analytics"
        """
        return "analytics"

    def get_pagination_strategy(self) -> PaginationStrategy:
        """
        Returns the pagination strategy selected by the node's "apiVersion" parameter.
        """
        return PaginationStrategy.from_api_version(self._node_context.get_node_parameter("apiVersion", None))

    ################ ENDPOINTS ##################
    @abstractmethod
    def _get_endpoint_batch_reports(self) -> str:
        """
        Returns the legacy reporting API endpoint for report batches (e.g. "/v4/reports:batchGet")
        """
        pass

    @abstractmethod
    def _get_endpoint_user_activity(self) -> str:
        """
        Returns the legacy reporting API endpoint for user activity search (e.g. "/v4/userActivity:search")
        """
        pass

    @abstractmethod
    def _get_endpoint_run_report(self, property_id: str) -> str:
        """
        Returns the data API endpoint for running a report on a property.

        Args:
            property_id (str): The analytics property ID.
        """
        pass

    ##########################################
    ############### REQUESTS #################
    ##########################################

    async def do_api_request(self, options: RequestOptions) -> Any:
        """Execute one analytics API request with JSON Accept/Content-Type headers.

        Raises:
            NodeApiError: If the request fails.
        """
        options = options.model_copy(update={
            "headers": {"Accept": "application/json", "Content-Type": "application/json", **options.headers},
        })
        return await super().do_api_request(options)

    async def do_google_request(
        self,
        method: str,
        endpoint: str,
        body: Any = None,
        qs: dict | None = None,
        uri: str | None = None,
        option: dict | None = None,
    ) -> Any:
        """Build and execute one analytics API request from its parts.

        Args:
            method (str): HTTP method.
            endpoint (str): The endpoint path.
            body (Any): The request body. Empty bodies are not sent.
            qs (dict | None): Query parameters. Empty queries are not sent.
            uri (str | None): Full URI override.
            option (dict | None): RequestOptions fields overriding the above, applied last.

        Returns:
            Any: The decoded JSON response.

        Raises:
            NodeApiError: If the request fails.
        """
        request = RequestOptions(method=method, endpoint=endpoint, body=body, qs=qs or {}, uri=uri)
        return await self.do_api_request(request.with_options(option))

    async def do_request_all_items(
        self,
        property_name: str,
        method: str,
        endpoint: str,
        body: Any = None,
        query: dict | None = None,
        uri: str | None = None,
    ) -> list[dict]:
        """Fetch every page of an analytics query.

        Args:
            property_name (str): Response property holding the items (legacy reporting API).
            method (str): HTTP method.
            endpoint (str): The endpoint path.
            body (Any): The request body.
            query (dict | None): Query parameters.
            uri (str | None): Full URI override.

        Returns:
            list[dict]: One merged response for the data API, the concatenated items for the reporting API.
        """
        strategy = self.get_pagination_strategy()
        aggregator = AnalyticsPageAggregator(strategy=strategy, execute=self.do_api_request, logger=self.logging)
        request = RequestOptions(method=method, endpoint=endpoint, body=body, qs=query or {}, uri=uri)
        return await aggregator.aggregate(request, property_name)

    ##########################################
    ############### OPERATIONS ###############
    ##########################################

    async def do_get_report(self) -> list[dict]:
        """Run the report configured by the node parameters.

        Returns:
            list[dict]: Data API: the run-report responses. Reporting API:
                        flattened records if "simple" is set, otherwise the report(s).
        """
        if self.get_pagination_strategy() == PaginationStrategy.DATA_API:
            return await self._do_get_data_api_report()
        return await self._do_get_reporting_api_report()

    async def _do_get_data_api_report(self) -> list[dict]:
        params = self._node_context
        property_id = params.get_node_parameter("propertyId")
        body: dict[str, Any] = {
            "dateRanges": params.get_node_parameter("dateRanges"),
            "metrics": [{"name": name} for name in params.get_node_parameter("metrics", [])],
        }
        dimensions = params.get_node_parameter("dimensions", [])
        if dimensions:
            body["dimensions"] = [{"name": name} for name in dimensions]
        dimension_filters = params.get_node_parameter("dimensionFilters", {})
        if dimension_filters:
            body["dimensionFilter"] = {"andGroup": {"expressions": process_filters(dimension_filters)}}

        endpoint = self._get_endpoint_run_report(property_id)
        if params.get_node_parameter("returnAll", False):
            return await self.do_request_all_items("", "POST", endpoint, body)
        body["limit"] = params.get_node_parameter("limit", 100)
        return [await self.do_google_request("POST", endpoint, body)]

    async def _do_get_reporting_api_report(self) -> list[dict]:
        params = self._node_context
        report_request: dict[str, Any] = {
            "viewId": params.get_node_parameter("viewId"),
            "dateRanges": params.get_node_parameter("dateRanges"),
            "metrics": [{"expression": expression} for expression in params.get_node_parameter("metrics", [])],
        }
        dimensions = params.get_node_parameter("dimensions", [])
        if dimensions:
            report_request["dimensions"] = [{"name": name} for name in dimensions]

        return_all = params.get_node_parameter("returnAll", False)
        if return_all:
            reports = await self.do_request_all_items(
                "reports", "POST", self._get_endpoint_batch_reports(), {"reportRequests": [report_request]},
            )
        else:
            report_request["pageSize"] = params.get_node_parameter("limit", 1000)
            response = await self.do_google_request(
                "POST", self._get_endpoint_batch_reports(), {"reportRequests": [report_request]},
            )
            reports = (response or {}).get("reports", [])

        if params.get_node_parameter("simple", True):
            return simplify(reports)
        if return_all and len(reports) > 1:
            return merge(reports)
        return reports

    async def do_search_user_activity(self) -> list[dict]:
        """Search the activity sessions of one user (legacy reporting API).

        Returns:
            list[dict]: The user's sessions.
        """
        params = self._node_context
        body: dict[str, Any] = {
            "viewId": params.get_node_parameter("viewId"),
            "user": {"userId": params.get_node_parameter("userId")},
        }
        activity_types = params.get_node_parameter("activityTypes", [])
        if activity_types:
            body["activityTypes"] = activity_types

        if params.get_node_parameter("returnAll", False):
            return await self.do_request_all_items("sessions", "POST", self._get_endpoint_user_activity(), body)
        body["pageSize"] = params.get_node_parameter("limit", 100)
        response = await self.do_google_request("POST", self._get_endpoint_user_activity(), body)
        return (response or {}).get("sessions", [])
