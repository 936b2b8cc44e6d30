"""Unit tests for flat export."""

import csv

from bomtree.export import CSV_HEADERS, flatten, write_csv
from bomtree.models.document import BOMDocument
from tests.bomtree_test.conftest import make_tree


def _document() -> BOMDocument:
    return BOMDocument(
        id="doc-1", equipment_id="eq-1", equipment_code="EQ-1", items=make_tree()
    )


class TestFlatten:
    def test_depth_first_with_levels(self):
        rows = flatten(make_tree())
        assert [(r.id, r.level) for r in rows] == [
            ("motor", 1),
            ("bearing", 2),
            ("ball", 3),
            ("seal", 2),
            ("frame", 1),
        ]

    def test_rows_carry_parent_and_price(self):
        rows = {r.id: r for r in flatten(make_tree())}
        assert rows["ball"].parent_id == "bearing"
        assert rows["motor"].parent_id is None
        assert rows["bearing"].total_price == 300

    def test_empty_forest(self):
        assert flatten([]) == []


class TestWriteCSV:
    def test_writes_header_and_rows(self, tmp_path):
        output_file = tmp_path / "bom.csv"

        count = write_csv(_document(), str(output_file))

        assert count == 5
        with open(output_file, newline="", encoding="utf-8-sig") as f:
            rows = list(csv.DictReader(f))
        assert list(rows[0].keys()) == CSV_HEADERS
        assert [r["Id"] for r in rows] == ["motor", "bearing", "ball", "seal", "frame"]
        assert rows[2]["Level"] == "3"
        assert rows[2]["Parent Id"] == "bearing"
        assert rows[0]["Parent Id"] == ""
        assert rows[0]["Part Type"] == "standard"

    def test_starts_with_byte_order_mark(self, tmp_path):
        output_file = tmp_path / "bom.csv"
        write_csv(_document(), str(output_file))
        assert output_file.read_bytes().startswith(b"\xef\xbb\xbf")
