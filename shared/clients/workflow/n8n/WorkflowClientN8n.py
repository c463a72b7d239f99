from shared.clients.workflow.WorkflowClientInterface import WorkflowClientInterface
from shared.helper.HelperConfig import HelperConfig
from shared.models.config import EnvConfig
from shared.models.node import NodeContext


class WorkflowClientN8n(WorkflowClientInterface):
    def __init__(self, helper_config: HelperConfig, node_context: NodeContext):
        super().__init__(helper_config=helper_config, node_context=node_context)
        self._base_url = self.get_config_val("BASE_URL", default=None, val_type="string")
        self._api_key = self.get_config_val("API_KEY", default=None, val_type="string")

    ##########################################
    ################ GETTER ##################
    ##########################################

    ################ GENERAL ##################
    def _get_engine_name(self) -> str:
        return "N8n"

    ################ CONFIG ##################
    def _get_required_config(self) -> list[EnvConfig]:
        return [
            EnvConfig(env_key="BASE_URL", val_type="string", default=None),
            EnvConfig(env_key="API_KEY", val_type="string", default=None),
        ]

    ################ AUTH ##################
    def _get_auth_header(self) -> dict:
        return {"X-N8N-API-KEY": self._api_key}

    ################ ENDPOINTS ##################
    def _get_base_url(self) -> str:
        return self._base_url

    def _get_endpoint_healthcheck(self) -> str:
        return "/healthz"

    def _get_endpoint_workflows(self) -> str:
        return "/api/v1/workflows"

    def _get_endpoint_executions(self) -> str:
        return "/api/v1/executions"

    def _get_endpoint_credentials(self) -> str:
        return "/api/v1/credentials"

    def _get_endpoint_credential_schema(self, credential_type: str) -> str:
        return f"/api/v1/credentials/schema/{credential_type}"
