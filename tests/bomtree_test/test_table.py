"""Unit tests for the table UI components."""

from bomtree.models.document import BOMDocument
from bomtree.ui.table import BOMTreeTable, DocumentListTable, fmt_money, fmt_qty
from tests.bomtree_test.conftest import make_item, make_tree


def _document(items=None) -> BOMDocument:
    return BOMDocument(
        id="doc-1",
        equipment_id="eq-1",
        equipment_code="EQ-PUMP-01",
        equipment_name="Pump",
        items=items if items is not None else make_tree(),
        total_cost=6182,
    )


def test_formatters():
    assert fmt_money(30000) == "30,000.00"
    assert fmt_qty(2.0) == "2"
    assert fmt_qty(2.5) == "2.5"


def test_collapsed_children_hidden():
    table = BOMTreeTable(_document())
    assert [item.id for item in table.visible_items()] == ["motor", "frame"]


def test_expand_all_shows_every_item():
    table = BOMTreeTable(_document(), expand_all=True)
    assert [item.id for item in table.visible_items()] == [
        "motor",
        "bearing",
        "ball",
        "seal",
        "frame",
    ]


def test_expanded_node_shows_children():
    motor = make_item("motor", is_expanded=True, children=[make_item("gear", level=2)])
    table = BOMTreeTable(_document([motor]))
    assert [item.id for item in table.visible_items()] == ["motor", "gear"]


def test_tree_table_rendering():
    output = BOMTreeTable(_document(), expand_all=True).to_string()

    assert "EQ-PUMP-01" in output
    assert "MOTOR" in output
    assert "BALL" in output
    assert "6,182.00" in output


def test_low_stock_row_renders():
    item = make_item("low", min_stock=5, current_stock=1)
    assert item.is_low_stock
    output = BOMTreeTable(_document([item])).to_string()
    assert "1/5" in output


def test_document_list_marks_selection():
    docs = [
        _document(),
        BOMDocument(id="doc-2", equipment_id="eq-2", equipment_code="EQ-FAN"),
    ]
    output = DocumentListTable(docs, selected_id="doc-2").to_string()

    assert "BOM documents (2)" in output
    assert "EQ-FAN" in output
    assert "*" in output
