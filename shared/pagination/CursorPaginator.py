"""Cursor-based paginator for 'get all' style listing endpoints."""

import logging
from typing import Awaitable, Callable

from shared.models.node import NodeContext
from shared.models.request import NodeExecutionData, RequestOptions

PageExecutor = Callable[[RequestOptions], Awaitable[list[dict]]]


class CursorPaginator:
    """Collects all items of a cursor-paginated listing.

    Every response page may carry a continuation cursor (default field
    "nextCursor") and a list of items (default field "data"). If the node has
    "returnAll" enabled, the cursor of the last page is sent as query
    parameter (default "cursor") of the next request until no cursor is
    returned anymore. Otherwise only the first page is fetched.
    """

    def __init__(
        self,
        node_context: NodeContext,
        logger: logging.Logger,
        cursor_param: str = "cursor",
        cursor_field: str = "nextCursor",
        items_field: str = "data",
    ):
        self._node_context = node_context
        self.logging = logger
        self._cursor_param = cursor_param
        self._cursor_field = cursor_field
        self._items_field = items_field

    async def paginate(self, request_options: RequestOptions, execute: PageExecutor) -> list[NodeExecutionData]:
        """Fetch pages until the listing is exhausted (or only the first page, without returnAll).

        Args:
            request_options (RequestOptions): The request template. It is never mutated.
            execute (PageExecutor): Executes one request and returns its response pages.

        Returns:
            list[NodeExecutionData]: All items of all pages, in server order, each wrapped individually.
        """
        return_all = bool(self._node_context.get_node_parameter("returnAll", True))

        executions: list[NodeExecutionData] = []
        next_cursor: str | None = None
        page = 1
        while True:
            request = request_options.with_query(**{self._cursor_param: next_cursor})
            pages = await execute(request)

            # the continuation cursor is taken from the last returned page
            next_cursor = pages[-1].get(self._cursor_field) if pages else None

            for response_page in pages:
                items = response_page.get(self._items_field)
                if not items:
                    continue
                executions.extend(NodeExecutionData(json=item) for item in items)

            self.logging.info(
                "Fetched page %d of %s, total items so far: %d",
                page, request.uri or request.endpoint, len(executions),
            )

            if not (return_all and next_cursor):
                break
            page += 1
        return executions
