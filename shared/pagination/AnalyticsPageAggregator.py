"""Page aggregation for the analytics reporting APIs.

Two upstream API shapes are supported. The data API paginates by offset and
declares the total row count; the legacy reporting API paginates by an opaque
next-page token. The strategy is chosen once per call and handled by one
dedicated handler.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Awaitable, Callable

from shared.models.request import RequestOptions

RequestExecutor = Callable[[RequestOptions], Awaitable[Any]]


class PaginationStrategy(str, Enum):
    DATA_API = "dataAPI"
    REPORTING_API = "reportingAPI"

    @classmethod
    def from_api_version(cls, api_version: str | None) -> "PaginationStrategy":
        """
        Resolves the strategy from the node's "apiVersion" parameter.
        Only "dataAPI" selects the data API, every other value the legacy reporting API.
        """
        return cls.DATA_API if api_version == cls.DATA_API.value else cls.REPORTING_API


class PageHandler(ABC):
    def __init__(self, execute: RequestExecutor, logger: logging.Logger):
        self._execute = execute
        self.logging = logger

    @abstractmethod
    async def collect(self, request: RequestOptions, property_name: str) -> list[dict]:
        """
        Fetches all pages for the request and returns the aggregated result.

        Args:
            request (RequestOptions): The first request. It is never mutated.
            property_name (str): Response property holding the items (legacy reporting API only).

        Returns:
            list[dict]: The aggregated result.
        """
        pass


class DataApiPageHandler(PageHandler):
    """Offset pagination: continue while the declared rowCount exceeds the rows collected so far."""

    PAGE_LIMIT = 100000

    async def collect(self, request: RequestOptions, property_name: str) -> list[dict]:
        rows: list[dict] = []
        request = request.with_query(limit=self.PAGE_LIMIT, offset=0)
        response = await self._execute(request) or {}
        rows.extend(self._get_rows(response))
        self.logging.info("Fetched data API rows %d of %d", len(rows), self._get_row_count(response))

        while self._get_row_count(response) > len(rows):
            request = request.with_query(offset=len(rows))
            response = await self._execute(request) or {}
            page_rows = self._get_rows(response)
            if not page_rows:
                self.logging.warning(
                    "Data API declared %d rows but returned none at offset %d, stopping pagination.",
                    self._get_row_count(response), len(rows),
                )
                break
            rows.extend(page_rows)
            self.logging.info("Fetched data API rows %d of %d", len(rows), self._get_row_count(response))

        return [{**response, "rows": rows}]

    def _get_rows(self, response: dict) -> list[dict]:
        rows = response.get("rows")
        if rows is None:
            self.logging.debug("Data API response without 'rows', treating as empty page.")
            return []
        return rows

    def _get_row_count(self, response: dict) -> int:
        return int(response.get("rowCount") or 0)


class ReportingPageHandler(PageHandler):
    """Token pagination: continue while the response carries a next-page token.

    The token is read from the top-level "nextPageToken" field (e.g. user
    activity search) or from the first entry of the item property (e.g.
    reports[0].nextPageToken for batchGet). The next request carries the token
    as reportRequests[0].pageToken if the body holds report requests,
    otherwise as top-level pageToken.
    """

    async def collect(self, request: RequestOptions, property_name: str) -> list[dict]:
        items: list[dict] = []
        page = 1
        while True:
            response = await self._execute(request) or {}
            page_items = response.get(property_name)
            if page_items is None:
                self.logging.debug("Reporting API response without '%s', treating as empty page.", property_name)
                page_items = []
            items.extend(page_items)
            self.logging.info("Fetched reporting API page %d, total %s so far: %d", page, property_name, len(items))

            next_page_token = self._extract_next_page_token(response, page_items)
            if not next_page_token:
                break
            request = self._build_next_request(request, next_page_token)
            page += 1
        return items

    def _extract_next_page_token(self, response: dict, page_items: list[dict]) -> str | None:
        token = response.get("nextPageToken")
        if token:
            return token
        if page_items and isinstance(page_items[0], dict):
            return page_items[0].get("nextPageToken") or None
        return None

    def _build_next_request(self, request: RequestOptions, next_page_token: str) -> RequestOptions:
        body = dict(request.body or {})
        report_requests = body.get("reportRequests")
        if isinstance(report_requests, list) and report_requests:
            body["reportRequests"] = [{**report_requests[0], "pageToken": next_page_token}, *report_requests[1:]]
        else:
            body["pageToken"] = next_page_token
        return request.with_body(body)


_HANDLERS: dict[PaginationStrategy, type[PageHandler]] = {
    PaginationStrategy.DATA_API: DataApiPageHandler,
    PaginationStrategy.REPORTING_API: ReportingPageHandler,
}


class AnalyticsPageAggregator:
    """Fetches every page of an analytics query, strictly one page after the other."""

    def __init__(self, strategy: PaginationStrategy, execute: RequestExecutor, logger: logging.Logger):
        self.strategy = strategy
        self._handler = _HANDLERS[strategy](execute=execute, logger=logger)

    async def aggregate(self, request: RequestOptions, property_name: str = "") -> list[dict]:
        """
        Returns a single merged data API response (wrapped in a list), or the
        concatenated items of all legacy reporting API pages.
        """
        return await self._handler.collect(request, property_name)
