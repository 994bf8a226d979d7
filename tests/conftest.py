"""Shared test fixtures: fragment factories and small in-memory documents."""

import pytest

from region_table_extractor.spatial import Selection
from region_table_extractor.store import TableStore
from region_table_extractor.structures import Cell, Row, Table, TextFragment


def frag(text, x, y, width=10, height=10):
    return TextFragment(text=text, x=x, y=y, width=width, height=height)


def make_table(grid, page_number=1):
    """Build a Table from a text grid, one 10px-wide cell every 20px."""
    rows = []
    for r, texts in enumerate(grid):
        rows.append(Row(cells=[Cell(text=t, x=20 * c, y=20 * r, width=10, height=10) for c, t in enumerate(texts)]))
    return Table(rows=rows, page_number=page_number)


class ListProvider:
    """In-memory fragment source keyed by page number."""

    def __init__(self, pages):
        self.pages = pages

    def page_count(self):
        return max(self.pages, default=0)

    def fragments_for_page(self, page_number):
        return list(self.pages.get(page_number, []))


@pytest.fixture
def scenario_fragments():
    return [
        frag("A", 0, 0),
        frag("B", 20, 1),
        frag("1", 0, 20),
        frag("2", 20, 19),
    ]


@pytest.fixture
def full_page():
    return Selection(start_x=-5, start_y=-5, end_x=500, end_y=500)


@pytest.fixture
def store():
    return TableStore()


HOCR_DOC = """<?xml version="1.0" encoding="UTF-8"?>
<html xmlns="http://www.w3.org/1999/xhtml">
<body>
<div class="ocr_page" id="page_1" title="bbox 0 0 600 800">
  <span class="ocr_line" title="bbox 10 10 200 30">
    <span class="ocrx_word" title="bbox 10 10 50 25">Code</span>
    <span class="ocrx_word" title="bbox 100 11 130 26">Qty</span>
  </span>
  <span class="ocr_line" title="bbox 10 40 200 60">
    <span class="ocrx_word" title="bbox 10 40 30 55">X</span>
    <span class="ocrx_word" title="bbox 100 41 110 56">5</span>
    <span class="ocrx_word" title="bbox 150 41 160 56">  </span>
  </span>
</div>
<div class="ocr_page" id="page_2" title="bbox 0 0 600 800">
  <span class="ocr_line" title="bbox 10 10 200 30">
    <span class="ocrx_word" title="bbox 10 10 50 25">Code</span>
    <span class="ocrx_word" title="bbox 100 10 140 25">Price</span>
  </span>
  <span class="ocr_line" title="bbox 10 40 200 60">
    <span class="ocrx_word" title="bbox 10 40 30 55">X</span>
  </span>
  <span class="ocr_line" title="bbox 10 70 200 90">
    <span class="ocrx_word" title="bbox 10 70 30 85">Y</span>
    <span class="ocrx_word" title="bbox 100 70 110 85">9</span>
  </span>
</div>
</body>
</html>
"""


@pytest.fixture
def hocr_path(tmp_path):
    path = tmp_path / "doc.hocr"
    path.write_text(HOCR_DOC, encoding="utf-8")
    return path
