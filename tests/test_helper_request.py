"""Unit tests for the JSON body pre-send action and node parameter resolution."""

import pytest
from pydantic import ValidationError

from shared.helper.HelperRequest import parse_and_set_body_json
from shared.models.errors import NodeOperationError
from shared.models.request import RequestOptions


class TestParseAndSetBodyJson:

    def test_replaces_body(self, make_context):
        context = make_context(workflowObject='{"name": "wf", "nodes": []}')
        request = RequestOptions(method="POST", body={"old": True})

        result = parse_and_set_body_json("workflowObject")(context, request)

        assert result.body == {"name": "wf", "nodes": []}
        assert request.body == {"old": True}

    def test_sets_body_property(self, make_context):
        context = make_context(data='{"token": "abc"}')
        request = RequestOptions(method="POST", body={"name": "cred", "type": "githubApi"})

        result = parse_and_set_body_json("data", "data")(context, request)

        assert result.body == {"name": "cred", "type": "githubApi", "data": {"token": "abc"}}

    def test_missing_parameter_defaults_to_empty_object(self, make_context):
        result = parse_and_set_body_json("workflowObject")(make_context(), RequestOptions())
        assert result.body == {}

    def test_invalid_json_raises_operation_error(self, make_context, node):
        context = make_context(data="{not json")

        with pytest.raises(NodeOperationError) as exc_info:
            parse_and_set_body_json("data", "data")(context, RequestOptions())

        assert exc_info.value.node == node
        assert "The 'data' property must be valid JSON, but cannot be parsed:" in exc_info.value.message


class TestNodeContext:

    def test_parameter_default(self, make_context):
        assert make_context().get_node_parameter("returnAll", True) is True

    def test_parameter_value_wins_over_default(self, make_context):
        assert make_context(returnAll=False).get_node_parameter("returnAll", True) is False

    def test_missing_parameter_without_default(self, make_context):
        with pytest.raises(NodeOperationError, match="apiVersion"):
            make_context().get_node_parameter("apiVersion")

    def test_missing_parameter_error_names_node(self, make_context, node):
        with pytest.raises(NodeOperationError) as exc_info:
            make_context().get_node_parameter("propertyId")

        assert exc_info.value.node == node
        assert str(exc_info.value) == "[Test Node] Could not get parameter 'propertyId'"


class TestRequestOptions:

    def test_with_options_overrides_fields(self):
        request = RequestOptions(method="GET", endpoint="/a", qs={"x": 1})

        updated = request.with_options({"method": "POST", "uri": "https://example.test/b"})

        assert updated.method == "POST"
        assert updated.uri == "https://example.test/b"
        assert updated.qs == {"x": 1}
        assert request.method == "GET"

    def test_with_options_rejects_unknown_field(self):
        with pytest.raises(ValidationError, match="methd"):
            RequestOptions().with_options({"methd": "POST"})

    def test_unknown_field_rejected_on_construction(self):
        with pytest.raises(ValidationError):
            RequestOptions(method="GET", query={"x": 1})
