import pytest

from line_decorator import Document, LineMetadata, colors

# Placeholder tokens so expected strings stay readable.
RED = "<red>"
BLUE = "<blue>"
RESET = "</>"


@pytest.fixture()
def empty_document():
    return Document()


@pytest.fixture()
def single_line():
    """
    Text: "0123456789" from "some file" line 69, no colors or annotations.
    """
    doc = Document()
    doc.add_line("0123456789", LineMetadata(file_name="some file", line_number=69))
    return doc


@pytest.fixture()
def below_scenario(single_line):
    """
    Below annotations on line 0:
      0: column 0, "abc"
      1: column 5, "123lolol"
      2: column 9, "doe ray me"
    """
    single_line.add_below(0, 0, "abc")
    single_line.add_below(0, 5, "123lolol")
    single_line.add_below(0, 9, "doe ray me")
    return single_line


@pytest.fixture()
def above_scenario(single_line):
    """
    Above annotations on line 0:
      0: column 2, "abc"
      1: column 7, "123lolol"
      2: column 9, "doe ray me"
    """
    single_line.add_above(0, 2, "abc")
    single_line.add_above(0, 7, "123lolol")
    single_line.add_above(0, 9, "doe ray me")
    return single_line


@pytest.fixture()
def decorated_document():
    """
    Two lines from different files with colors on both sides:
      line 0: "0123456789" (some file @ 69), colored [2,5) magenta and [4,8) bg magenta,
              below: "abc"@0 (bg cyan), "123lolol"@5, "doe ray me"@9
              above: "abc"@2, "123lolol"@7 (green [0,3), red [3,6)), "doe ray me"@9
      line 1: "x = 1" (main.py @ 7), no annotations
    """
    doc = Document()
    doc.add_line("0123456789", LineMetadata("some file", 69))
    doc.color_line(0, (2, 5, colors.FG_MAGENTA))
    doc.color_line(0, (4, 8, colors.BG_MAGENTA))

    doc.add_below(0, 0, "abc")
    doc.add_below(0, 5, "123lolol")
    doc.add_below(0, 9, "doe ray me")
    doc.color_below(0, 0, (0, 3, colors.BG_CYAN))

    doc.add_above(0, 2, "abc")
    doc.add_above(0, 7, "123lolol")
    doc.add_above(0, 9, "doe ray me")
    doc.color_above(0, 1, (0, 3, colors.FG_GREEN))
    doc.color_above(0, 1, (3, 6, colors.FG_RED))

    doc.add_line("x = 1", LineMetadata("main.py", 7))
    return doc
