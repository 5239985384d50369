import pytest

from line_decorator import Annotation, ColorRange, InvalidInputError, Phase, Side, above_rows, below_rows, layout_rows

from tests.fixtures import *


def plain_rows(rows):
    return [row.plain() for row in rows]


@pytest.fixture()
def below_annotations():
    return [Annotation(0, "abc"), Annotation(5, "123lolol"), Annotation(9, "doe ray me")]


@pytest.fixture()
def above_annotations():
    return [Annotation(2, "abc"), Annotation(7, "123lolol"), Annotation(9, "doe ray me")]


# ------------------------------
# Below side
# ------------------------------

def test_below_no_annotations_no_rows():
    assert list(below_rows([])) == []


def test_below_single_annotation_cycle():
    rows = list(below_rows([Annotation(4, "here")]))
    assert [row.phase for row in rows] == [Phase.LEAD, Phase.ARROW, Phase.REVEAL]
    assert plain_rows(rows) == ["    │", "    v", "    here"]


def test_below_scenario_rows(below_annotations):
    assert plain_rows(below_rows(below_annotations)) == [
        "│    │   │",
        "v    │   │",
        "abc  │   │",
        "     │   │",
        "     v   │",
        "     123lolol",
        "         │",
        "         v",
        "         doe ray me",
    ]


def test_below_each_text_revealed_once_at_its_column(below_annotations):
    rows = list(below_rows(below_annotations))
    assert len(rows) == 3 * len(below_annotations)

    reveal_rows = {}
    for row_index, row in enumerate(rows):
        for index in row.revealed:
            assert index not in reveal_rows
            reveal_rows[index] = row_index
    assert reveal_rows == {0: 2, 1: 5, 2: 8}

    for index, annotation in enumerate(below_annotations):
        line = rows[reveal_rows[index]].plain()
        assert line[annotation.column:annotation.column + len(annotation.text)] == annotation.text


def test_below_connectors_before_reveal(below_annotations):
    rows = plain_rows(below_rows(below_annotations))
    # annotation 2 (column 9) gets a connector on every row before its turn,
    # except where annotation 1's text covers its column
    for row in rows[:5]:
        assert row[9] == "│"
    assert rows[5][9] == "o"
    assert rows[6][9] == "│"
    assert rows[7][9] == "v"


def test_below_revealed_annotation_draws_nothing_under_its_text(below_annotations):
    rows = plain_rows(below_rows(below_annotations))
    for row in rows[3:]:
        assert not row[:3].strip()


def test_below_coincident_columns_all_revealed():
    rows = plain_rows(below_rows([Annotation(3, "x"), Annotation(3, "y")]))
    assert rows == ["   │", "   v", "   x", "   │", "   v", "   y"]


def test_below_reveal_keeps_color_ranges():
    ranges = [ColorRange(0, 2, RED)]
    rows = list(below_rows([Annotation(1, "ab", ranges)]))
    reveal = rows[2].placements[0]
    assert reveal.is_reveal
    assert reveal.color_ranges == tuple(ranges)


def test_below_column_past_line_end():
    rows = plain_rows(below_rows([Annotation(20, "far")]))
    assert rows == [" " * 20 + "│", " " * 20 + "v", " " * 20 + "far"]


def test_below_custom_glyphs():
    rows = plain_rows(below_rows([Annotation(0, "a")], vertical="|", arrow="V"))
    assert rows == ["|", "V", "a"]


def test_below_is_lazy(below_annotations):
    rows = below_rows(below_annotations)
    first = next(rows)
    assert first.phase is Phase.LEAD
    assert len(list(rows)) == 8


# ------------------------------
# Above side
# ------------------------------

def test_above_no_annotations_no_rows():
    assert list(above_rows([])) == []


def test_above_single_annotation_cycle():
    rows = list(above_rows([Annotation(4, "here")]))
    assert [row.phase for row in rows] == [Phase.REVEAL, Phase.ARROW, Phase.LEAD]
    assert plain_rows(rows) == ["    here", "    ^", "    │"]


def test_above_scenario_rows(above_annotations):
    assert plain_rows(above_rows(above_annotations)) == [
        "  abc",
        "  ^",
        "  │",
        "  │    123lolol",
        "  │    ^",
        "  │    │",
        "  │    │ doe ray me",
        "  │    │ ^",
        "  │    │ │",
    ]


def test_above_last_row_connects_every_annotation(above_annotations):
    last = list(above_rows(above_annotations))[-1].plain()
    for annotation in above_annotations:
        assert last[annotation.column] == "│"


def test_above_coincident_columns_keep_skip_rule():
    # the second annotation sits under the first one's glyph on every row
    rows = list(above_rows([Annotation(3, "x"), Annotation(3, "y")]))
    assert plain_rows(rows) == ["   x", "   ^", "   │", "   │", "   ^", "   │"]
    assert [index for row in rows for index in row.revealed] == [0]


def test_above_unrevealed_annotation_inside_text_is_skipped():
    rows = plain_rows(above_rows([Annotation(0, "long text"), Annotation(4, "b")]))
    assert rows == ["long text", "^", "│", "│   b", "│   ^", "│   │"]


def test_above_rows_have_no_trailing_padding(above_annotations):
    # unrevealed annotations further right add nothing to the row
    rows = plain_rows(above_rows(above_annotations))
    assert rows[0] == "  abc"
    assert rows[1] == "  ^"
    assert rows[4] == "  │    ^"
    assert all(row == row.rstrip(" ") for row in rows)


def test_below_rows_have_no_trailing_padding(below_annotations):
    assert all(row == row.rstrip(" ") for row in plain_rows(below_rows(below_annotations)))


# ------------------------------
# Dispatch
# ------------------------------

def test_layout_rows_dispatches_on_side(above_annotations):
    assert plain_rows(layout_rows(above_annotations, Side.ABOVE)) == plain_rows(above_rows(above_annotations))
    assert plain_rows(layout_rows(above_annotations, "below")) == plain_rows(below_rows(above_annotations))


def test_layout_rows_rejects_unknown_side(above_annotations):
    with pytest.raises(InvalidInputError):
        layout_rows(above_annotations, "left")
