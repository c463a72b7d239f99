"""Unit tests for HelperConfig."""

import pytest


class TestHelperConfig:

    def test_string_default(self, helper_config, monkeypatch):
        monkeypatch.delenv("SOME_KEY", raising=False)
        assert helper_config.get_string_val("some_key", default="x") == "x"

    def test_string_required(self, helper_config, monkeypatch):
        monkeypatch.delenv("SOME_KEY", raising=False)
        with pytest.raises(ValueError, match="SOME_KEY"):
            helper_config.get_string_val("SOME_KEY")

    def test_number(self, helper_config, monkeypatch):
        monkeypatch.setenv("A_NUMBER", "2.5")
        assert helper_config.get_number_val("A_NUMBER") == 2.5
        monkeypatch.setenv("A_NUMBER", "nope")
        with pytest.raises(ValueError):
            helper_config.get_number_val("A_NUMBER")

    def test_bool(self, helper_config, monkeypatch):
        monkeypatch.setenv("A_FLAG", "Yes")
        assert helper_config.get_bool_val("A_FLAG") is True

    def test_list(self, helper_config, monkeypatch):
        monkeypatch.setenv("A_LIST", "[a, b,,c]")
        assert helper_config.get_list_val("A_LIST") == ["a", "b", "c"]
        monkeypatch.setenv("A_LIST", "a,b")
        with pytest.raises(ValueError):
            helper_config.get_list_val("A_LIST")

    def test_dict(self, helper_config, monkeypatch):
        monkeypatch.setenv("PARAMS", '{"returnAll": true}')
        assert helper_config.get_dict_val("PARAMS") == {"returnAll": True}
        monkeypatch.setenv("PARAMS", "[1, 2]")
        with pytest.raises(ValueError, match="JSON object"):
            helper_config.get_dict_val("PARAMS")
