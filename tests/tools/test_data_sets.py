"""
Unit tests for Data Set tools.
"""

from __future__ import annotations

from src.signage.client import XiboClient

from ..conftest import SAMPLE_DATA_SET, FakeCms
from .conftest import call_tool, form_of, result_of


class TestDataSets:
    """Tests for data set tools."""

    def test_get_data_sets(self, patch_get_client: XiboClient, fake_cms: FakeCms) -> None:
        """Test searching data sets by code."""
        fake_cms.add("GET", "/api/dataset", json=[SAMPLE_DATA_SET])

        result = result_of(call_tool("get_data_sets", {"code": "menu"}))

        assert result["data"] == [SAMPLE_DATA_SET]
        assert fake_cms.last.url.params["code"] == "menu"

    def test_edit_data_set(self, patch_get_client: XiboClient, fake_cms: FakeCms) -> None:
        """Test renaming a data set."""
        fake_cms.add("PUT", "/api/dataset/20", json={**SAMPLE_DATA_SET, "dataSet": "Prices"})

        result = result_of(call_tool("edit_data_set", {"dataSetId": 20, "dataSet": "Prices"}))

        assert result["data"]["dataSet"] == "Prices"
        assert form_of(fake_cms) == {"dataSet": ["Prices"]}

    def test_add_column(self, patch_get_client: XiboClient, fake_cms: FakeCms) -> None:
        """Test adding a number column."""
        fake_cms.add("POST", "/api/dataset/20/column", json={
            "dataSetColumnId": 3, "dataSetId": 20, "heading": "Price", "dataTypeId": 2, "columnOrder": 2,
        })

        result = result_of(call_tool("add_data_set_column", {
            "dataSetId": 20, "heading": "Price", "dataTypeId": 2, "columnOrder": 2,
        }))

        assert result["data"]["dataSetColumnId"] == 3
        assert form_of(fake_cms) == {"heading": ["Price"], "dataTypeId": ["2"], "columnOrder": ["2"]}


class TestDataSetRows:
    """Tests for data set row tools."""

    def test_get_rows_keeps_column_values(self, patch_get_client: XiboClient, fake_cms: FakeCms) -> None:
        """Test that column values come back keyed by heading."""
        rows = [{"id": 1, "Item": "Coffee", "Price": 2.5}, {"id": 2, "Item": "Tea", "Price": 2}]
        fake_cms.add("GET", "/api/dataset/data/20", json=rows)

        result = result_of(call_tool("get_data_set_data", {"dataSetId": 20}))

        assert result["data"] == rows

    def test_add_row_sends_column_fields(self, patch_get_client: XiboClient, fake_cms: FakeCms) -> None:
        """Test that row values are sent as one form field per column."""
        fake_cms.add("POST", "/api/dataset/data/20", status=201, json={"id": 3})

        result = result_of(call_tool("add_data_set_row", {
            "dataSetId": 20,
            "values": {"dataSetColumnId_1": "Juice", "dataSetColumnId_3": 3.5},
        }))

        assert result["data"] == {"id": 3}
        assert form_of(fake_cms) == {"dataSetColumnId_1": ["Juice"], "dataSetColumnId_3": ["3.5"]}

    def test_edit_row(self, patch_get_client: XiboClient, fake_cms: FakeCms) -> None:
        """Test changing one value in a row."""
        fake_cms.add("PUT", "/api/dataset/data/20/3", status=204)

        result = result_of(call_tool("edit_data_set_row", {
            "dataSetId": 20, "rowId": 3, "values": {"dataSetColumnId_3": 4},
        }))

        assert result["message"] == "Data set row updated successfully."
        assert form_of(fake_cms) == {"dataSetColumnId_3": ["4"]}
