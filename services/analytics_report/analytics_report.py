"""Analytics report runner.

Runs one analytics report (or user activity search) with node parameters read
from ANALYTICS_REPORT_PARAMETERS and prints the aggregated result as JSON.

Usage:
    ANALYTICS_GOOGLE_ACCESS_TOKEN=... \
    ANALYTICS_REPORT_PARAMETERS='{"apiVersion": "dataAPI", "propertyId": "123", ...}' \
    python -m services.analytics_report.analytics_report
"""

import asyncio
import json

import httpx

from shared.clients.analytics.google.AnalyticsClientGoogle import AnalyticsClientGoogle
from shared.helper.HelperConfig import HelperConfig
from shared.logging.logging_setup import setup_logging
from shared.models.errors import NodeError
from shared.models.node import NodeContext
from shared.models.node_details import NodeDetails


async def main() -> None:
    """Run the configured analytics operation."""
    logger = setup_logging()
    config = HelperConfig(logger=logger)
    parameters = config.get_dict_val("ANALYTICS_REPORT_PARAMETERS")
    operation = config.get_string_val("ANALYTICS_REPORT_OPERATION", default="report")

    node_context = NodeContext(
        node=NodeDetails(name="Google Analytics", type="googleAnalytics"),
        parameters=parameters,
    )
    client = AnalyticsClientGoogle(helper_config=config, node_context=node_context)

    try:
        await client.boot()
        await client.do_healthcheck()
        if operation == "userActivity":
            result = await client.do_search_user_activity()
        else:
            result = await client.do_get_report()
        logger.info("Analytics %s returned %d entries.", operation, len(result), color="green")
        print(json.dumps(result, indent=2))
    except (NodeError, httpx.HTTPError) as e:
        logger.error(f"Analytics {operation} failed: {e}. Aborting.")
    finally:
        await client.close()


if __name__ == "__main__":
    asyncio.run(main())
