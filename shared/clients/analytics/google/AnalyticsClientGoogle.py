from shared.clients.analytics.AnalyticsClientInterface import AnalyticsClientInterface
from shared.helper.HelperConfig import HelperConfig
from shared.models.config import EnvConfig
from shared.models.node import NodeContext
from shared.pagination.AnalyticsPageAggregator import PaginationStrategy

DATA_API_BASE_URL = "https://analyticsdata.googleapis.com"
REPORTING_API_BASE_URL = "https://analyticsreporting.googleapis.com"


class AnalyticsClientGoogle(AnalyticsClientInterface):
    def __init__(self, helper_config: HelperConfig, node_context: NodeContext):
        super().__init__(helper_config=helper_config, node_context=node_context)
        self._access_token = self.get_config_val("ACCESS_TOKEN", default=None, val_type="string")
        self._data_api_base_url = self.get_config_val("DATA_API_BASE_URL", default=DATA_API_BASE_URL, val_type="string")
        self._reporting_api_base_url = self.get_config_val("REPORTING_API_BASE_URL", default=REPORTING_API_BASE_URL, val_type="string")

    ##########################################
    ################ GETTER ##################
    ##########################################

    ################ GENERAL ##################
    def _get_engine_name(self) -> str:
        return "Google"

    ################ CONFIG ##################
    def _get_required_config(self) -> list[EnvConfig]:
        return [
            EnvConfig(env_key="ACCESS_TOKEN", val_type="string", default=None),
            EnvConfig(env_key="DATA_API_BASE_URL", val_type="string", default=DATA_API_BASE_URL),
            EnvConfig(env_key="REPORTING_API_BASE_URL", val_type="string", default=REPORTING_API_BASE_URL),
        ]

    ################ AUTH ##################
    def _get_auth_header(self) -> dict:
        return {"Authorization": f"Bearer {self._access_token}"}

    ################ ENDPOINTS ##################
    def _get_base_url(self) -> str:
        if self.get_pagination_strategy() == PaginationStrategy.DATA_API:
            return self._data_api_base_url
        return self._reporting_api_base_url

    def _get_endpoint_healthcheck(self) -> str:
        version = "v1beta" if self.get_pagination_strategy() == PaginationStrategy.DATA_API else "v4"
        return f"/$discovery/rest?version={version}"

    def _get_endpoint_batch_reports(self) -> str:
        return "/v4/reports:batchGet"

    def _get_endpoint_user_activity(self) -> str:
        return "/v4/userActivity:search"

    def _get_endpoint_run_report(self, property_id: str) -> str:
        return f"/v1beta/properties/{property_id}:runReport"
