"""Unit tests for the analytics response helpers."""

import copy

from shared.helper.HelperAnalytics import merge, process_filters, simplify


def _page(rows, dimensions=None):
    header = {"dimensions": dimensions} if dimensions is not None else {}
    return {"columnHeader": header, "data": {"rows": rows}}


def _row(dimensions, values):
    return {"dimensions": dimensions, "metrics": [{"values": values}]}


class TestSimplify:

    def test_maps_dimensions_and_total(self):
        pages = [_page([_row(["US"], ["42"])], dimensions=["country"])]
        assert simplify(pages) == [{"country": "US", "total": "42"}]

    def test_multiple_dimensions_and_metrics(self):
        pages = [_page([_row(["US", "Chrome"], ["42", "7"])], dimensions=["ga:country", "ga:browser"])]
        assert simplify(pages) == [{"ga:country": "US", "ga:browser": "Chrome", "total": "42,7"}]

    def test_without_dimensions_only_total(self):
        pages = [_page([_row([], ["1", "2"])])]
        assert simplify(pages) == [{"total": "1,2"}]

    def test_page_without_rows_is_skipped(self):
        pages = [
            {"columnHeader": {"dimensions": ["country"]}, "data": {}},
            _page([_row(["DE"], ["3"])], dimensions=["country"]),
        ]
        assert simplify(pages) == [{"country": "DE", "total": "3"}]


class TestMerge:

    def test_concatenates_rows_in_page_order(self):
        pages = [
            _page([_row(["US"], ["1"])], dimensions=["country"]),
            _page([_row(["DE"], ["2"]), _row(["FR"], ["3"])], dimensions=["country"]),
        ]

        merged = merge(pages)

        assert len(merged) == 1
        assert merged[0]["columnHeader"] == {"dimensions": ["country"]}
        assert [row["dimensions"][0] for row in merged[0]["data"]["rows"]] == ["US", "DE", "FR"]

    def test_single_page_is_unchanged(self):
        page = _page([_row(["US"], ["1"])], dimensions=["country"])
        assert merge([page]) == [page]

    def test_input_is_not_modified(self):
        pages = [_page([_row(["US"], ["1"])]), _page([_row(["DE"], ["2"])])]
        original = copy.deepcopy(pages)
        merge(pages)
        assert pages == original


class TestProcessFilters:

    def test_numeric_filter(self):
        expression = {"numericFilter": [{"fieldName": "x", "valueType": "int64Value", "value": "5"}]}
        assert process_filters(expression) == [
            {"filter": {"fieldName": "x", "numericFilter": {"value": {"int64Value": "5"}}}}
        ]

    def test_in_list_filter(self):
        expression = {"inListFilter": [{"fieldName": "country", "values": "US,DE", "caseSensitive": True}]}
        assert process_filters(expression) == [
            {"filter": {"fieldName": "country", "inListFilter": {"values": ["US", "DE"], "caseSensitive": True}}}
        ]

    def test_between_filter(self):
        expression = {"betweenFilter": [{"fieldName": "y", "valueType": "doubleValue", "fromValue": 1.5, "toValue": 3}]}
        assert process_filters(expression) == [
            {"filter": {"fieldName": "y", "betweenFilter": {"fromValue": {"doubleValue": 1.5}, "toValue": {"doubleValue": 3}}}}
        ]

    def test_other_filter_types_pass_through(self):
        expression = {"stringFilter": [{"fieldName": "city", "matchType": "EXACT", "value": "Berlin"}]}
        assert process_filters(expression) == [
            {"filter": {"fieldName": "city", "stringFilter": {"matchType": "EXACT", "value": "Berlin"}}}
        ]

    def test_order_and_input_untouched(self):
        expression = {
            "stringFilter": [{"fieldName": "a", "value": "1"}, {"fieldName": "b", "value": "2"}],
            "numericFilter": [{"fieldName": "c", "valueType": "int64Value", "value": "3"}],
        }
        original = copy.deepcopy(expression)

        result = process_filters(expression)

        assert [entry["filter"]["fieldName"] for entry in result] == ["a", "b", "c"]
        assert expression == original
