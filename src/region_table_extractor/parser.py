# src/region_table_extractor/parser.py
from __future__ import annotations
import logging
import re
from typing import Dict, List, Optional, Tuple
from bs4 import BeautifulSoup
from .structures import TextFragment

log = logging.getLogger(__name__)

BBOX_RE = re.compile(r"bbox (\d+)\s+(\d+)\s+(\d+)\s+(\d+)")

def parse_bbox(title_attr: str) -> Optional[Tuple[int, int, int, int]]:
    if not title_attr:
        return None
    m = BBOX_RE.search(title_attr)
    if not m:
        return None
    x1, y1, x2, y2 = map(int, m.groups())
    return x1, y1, x2, y2

def _load_soup(text: str) -> BeautifulSoup:
    """
    Intenta XML (lxml-xml) y, si no hay nodos HOCR, fallback a HTML (lxml).
    """
    soup_xml = BeautifulSoup(text, "lxml-xml")
    if soup_xml.find(class_=lambda c: c and "ocr_page" in c):
        return soup_xml
    return BeautifulSoup(text, "lxml")

def parse_hocr_pages(raw: str) -> Dict[int, List[TextFragment]]:
    """
    Convierte cada `ocrx_word` en un TextFragment, agrupados por página (1-based).
    Las palabras sin bbox o sin texto se descartan.
    """
    soup = _load_soup(raw)
    pages: Dict[int, List[TextFragment]] = {}
    for pi, page in enumerate(soup.find_all(class_=lambda c: c and "ocr_page" in c), start=1):
        fragments: List[TextFragment] = []
        for w in page.find_all(class_=lambda c: c and "ocrx_word" in c):
            bb = parse_bbox(w.get("title", ""))
            if not bb:
                continue
            text = (w.get_text() or "").strip()
            if not text:
                continue
            x1, y1, x2, y2 = bb
            fragments.append(TextFragment(text=text, x=x1, y=y1, width=x2 - x1, height=y2 - y1))
        pages[pi] = fragments
    return pages

class HocrFragmentProvider:
    """Fuente de fragmentos a partir de un archivo hOCR (una `ocr_page` por página)."""

    def __init__(self, hocr_path: str) -> None:
        self.path = hocr_path
        with open(hocr_path, "r", encoding="utf-8") as f:
            raw = f.read()
        self._pages = parse_hocr_pages(raw)
        log.info("HOCR %s: %d páginas.", hocr_path, len(self._pages))

    def page_count(self) -> int:
        return len(self._pages)

    def fragments_for_page(self, page_number: int) -> List[TextFragment]:
        return list(self._pages.get(page_number, []))
