import json

import pytest

from region_table_extractor.parser import HocrFragmentProvider, parse_bbox
from region_table_extractor.providers import JsonFragmentProvider, load_provider
from region_table_extractor.structures import TextFragment


class TestHocr:

    def test_parse_bbox(self):
        assert parse_bbox("bbox 1 2 30 40; x_wconf 95") == (1, 2, 30, 40)
        assert parse_bbox("x_wconf 95") is None
        assert parse_bbox("") is None

    def test_pages_and_fragments(self, hocr_path):
        provider = HocrFragmentProvider(str(hocr_path))
        assert provider.page_count() == 2
        page1 = provider.fragments_for_page(1)
        assert [f.text for f in page1] == ["Code", "Qty", "X", "5"]
        assert page1[0] == TextFragment(text="Code", x=10, y=10, width=40, height=15)

    def test_unknown_page_is_empty(self, hocr_path):
        assert HocrFragmentProvider(str(hocr_path)).fragments_for_page(9) == []


class TestJson:

    def test_from_mapping(self):
        provider = JsonFragmentProvider({"pages": {"2": [{"text": "A", "x": 1, "y": 2, "width": 3, "height": 4}]}})
        assert provider.page_count() == 2
        assert provider.fragments_for_page(2) == [TextFragment("A", 1.0, 2.0, 3.0, 4.0)]
        assert provider.fragments_for_page(1) == []

    def test_malformed_fragments_are_skipped(self):
        provider = JsonFragmentProvider({"pages": {"1": [{"text": "A", "x": 1}, {"text": "B", "x": 0, "y": 0, "width": 1, "height": 1}]}})
        assert [f.text for f in provider.fragments_for_page(1)] == ["B"]

    def test_from_file(self, tmp_path):
        path = tmp_path / "frags.json"
        path.write_text(json.dumps({"pages": {"1": [{"text": "A", "x": 0, "y": 0, "width": 1, "height": 1}]}}), encoding="utf-8")
        assert [f.text for f in JsonFragmentProvider(path).fragments_for_page(1)] == ["A"]


def test_load_provider_by_suffix(tmp_path, hocr_path):
    assert isinstance(load_provider(str(hocr_path)), HocrFragmentProvider)
    path = tmp_path / "frags.json"
    path.write_text('{"pages": {}}', encoding="utf-8")
    assert isinstance(load_provider(str(path)), JsonFragmentProvider)
    with pytest.raises(ValueError):
        load_provider(str(tmp_path / "doc.pdf"))
