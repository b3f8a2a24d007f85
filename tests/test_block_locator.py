import datetime as dt

import pytest

from dto.grid import SheetGrid
from pivot.block_locator import find_tags


def _header(values):
    cells = {(2, col): v for col, v in values.items()}
    cells[(0, 0)] = "name"
    return SheetGrid.from_cells(cells)


def test_tags_ordered_by_column():
    grid = _header({3: "C_TAG", 1: "A_TAG", 2: "B_TAG"})

    tags = find_tags(grid, 2)

    assert [(t.label, t.column) for t in tags] == [
        ("A_TAG", 1),
        ("B_TAG", 2),
        ("C_TAG", 3),
    ]


@pytest.mark.parametrize(
    "label, expected",
    (
        pytest.param("TEMP_DUMMY_SENSOR", False, id="substring"),
        pytest.param("DUMMY", False, id="exact"),
        pytest.param("TEMPDUM", True, id="partial-marker"),
        pytest.param("temp_dummy", True, id="lowercase"),
    ),
)
def test_dummy_filter_is_case_sensitive_substring(label, expected):
    grid = _header({1: label})

    assert bool(find_tags(grid, 2)) is expected


def test_non_text_and_absent_cells_skipped():
    grid = _header({1: 12.5, 2: dt.datetime(2024, 1, 1), 4: "FLOW", 5: True})

    tags = find_tags(grid, 2)

    assert [t.label for t in tags] == ["FLOW"]


def test_row_outside_grid_has_no_tags():
    grid = _header({1: "FLOW"})

    assert find_tags(grid, 2002) == []


def test_only_declared_range_is_scanned():
    grid = SheetGrid(cells={(2, 0): "IN", (2, 9): "OUT"}, min_col=0, max_col=3, max_row=2)

    assert [t.label for t in find_tags(grid, 2)] == ["IN"]
