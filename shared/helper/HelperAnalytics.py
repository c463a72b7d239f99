"""Transformations of analytics reporting responses and filter definitions."""

import copy
from typing import Any


def simplify(pages: list[dict]) -> list[dict]:
    """Flatten report pages into one record per row.

    Every row becomes a dict mapping each declared dimension name to the row's
    value at the same position, plus "total" holding the comma-joined values
    of the first metric block. Pages without rows contribute nothing.

    Args:
        pages (list[dict]): Pages shaped as {"columnHeader": {"dimensions": [...]}, "data": {"rows": [...]}}.

    Returns:
        list[dict]: The flattened records, in page and row order.
    """
    records: list[dict] = []
    for page in pages:
        dimensions = page.get("columnHeader", {}).get("dimensions")
        rows = page.get("data", {}).get("rows")
        if rows is None:
            continue
        for row in rows:
            record: dict[str, Any] = {}
            if dimensions:
                for index, dimension in enumerate(dimensions):
                    record[dimension] = row["dimensions"][index]
            record["total"] = ",".join(row["metrics"][0]["values"])
            records.append(record)
    return records


def merge(pages: list[dict]) -> list[dict]:
    """Merge report pages sharing one column header into a single report.

    The header and the data block of the first page are kept, its rows are
    replaced by the rows of all pages in page order. The input is not modified.

    Returns:
        list[dict]: A single-element list holding the merged report.
    """
    first = pages[0]
    all_rows: list[dict] = []
    for page in pages:
        all_rows.extend(page.get("data", {}).get("rows") or [])
    return [
        {
            "columnHeader": first.get("columnHeader"),
            "data": {**first.get("data", {}), "rows": all_rows},
        }
    ]


def process_filters(expression: dict[str, list[dict]]) -> list[dict]:
    """Convert filter definitions by type into data API filter expressions.

    Example:
        {"numericFilter": [{"fieldName": "x", "valueType": "int64Value", "value": "5"}]}
        becomes
        [{"filter": {"fieldName": "x", "numericFilter": {"value": {"int64Value": "5"}}}}]

    Args:
        expression (dict[str, list[dict]]): Filter definitions grouped by filter type
            ("stringFilter", "inListFilter", "numericFilter", "betweenFilter").

    Returns:
        list[dict]: One {"filter": {...}} envelope per filter definition.
    """
    processed: list[dict] = []
    for filter_type, filters in expression.items():
        for filter_def in filters:
            filter_def = copy.deepcopy(filter_def)
            field_name = filter_def.pop("fieldName", None)

            if filter_type == "inListFilter":
                filter_def["values"] = filter_def["values"].split(",")

            if filter_type == "numericFilter":
                value_type = filter_def.pop("valueType", None)
                filter_def["value"] = {value_type: filter_def.get("value")}

            if filter_type == "betweenFilter":
                value_type = filter_def.pop("valueType", None)
                filter_def["fromValue"] = {value_type: filter_def.get("fromValue")}
                filter_def["toValue"] = {value_type: filter_def.get("toValue")}

            processed.append({"filter": {"fieldName": field_name, filter_type: filter_def}})
    return processed
