"""Workflow inventory runner.

Lists the workflows of a workflow-automation instance, following the cursor
over all pages unless WORKFLOW_INVENTORY_RETURN_ALL is false.

Usage:
    WORKFLOW_N8N_BASE_URL=http://localhost:5678 WORKFLOW_N8N_API_KEY=... \
    python -m services.workflow_inventory.workflow_inventory
"""

import asyncio
import json

import httpx

from shared.clients.workflow.n8n.WorkflowClientN8n import WorkflowClientN8n
from shared.helper.HelperConfig import HelperConfig
from shared.logging.logging_setup import setup_logging
from shared.models.errors import NodeError
from shared.models.node import NodeContext
from shared.models.node_details import NodeDetails


async def main() -> None:
    """List all workflows and print them as JSON."""
    logger = setup_logging()
    config = HelperConfig(logger=logger)
    node_context = NodeContext(
        node=NodeDetails(name="Workflow Inventory", type="n8nApi"),
        parameters={
            "returnAll": config.get_bool_val("WORKFLOW_INVENTORY_RETURN_ALL", default=True),
            "limit": config.get_number_val("WORKFLOW_INVENTORY_LIMIT", default=100),
        },
    )
    client = WorkflowClientN8n(helper_config=config, node_context=node_context)

    try:
        await client.boot()
        await client.do_healthcheck()
        active_only = config.get_bool_val("WORKFLOW_INVENTORY_ACTIVE_ONLY", default=False)
        workflows = await client.do_fetch_workflows(active=True if active_only else None)
        logger.info("Found %d workflows.", len(workflows), color="green")
        print(json.dumps([item.to_dict() for item in workflows], indent=2))
    except (NodeError, httpx.HTTPError) as e:
        logger.error(f"Listing workflows failed: {e}. Aborting.")
    finally:
        await client.close()


if __name__ == "__main__":
    asyncio.run(main())
