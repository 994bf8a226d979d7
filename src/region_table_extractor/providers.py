from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Protocol, Union

from .parser import HocrFragmentProvider
from .structures import TextFragment

log = logging.getLogger(__name__)

HOCR_SUFFIXES = {".hocr", ".html", ".htm", ".xml"}


class FragmentProvider(Protocol):
    """Cualquier fuente capaz de entregar los fragmentos de texto de una página."""

    def page_count(self) -> int: ...

    def fragments_for_page(self, page_number: int) -> List[TextFragment]: ...


def _fragment_from_dict(raw: Mapping[str, Any]) -> TextFragment:
    return TextFragment(
        text=str(raw.get("text") or ""),
        x=float(raw["x"]),
        y=float(raw["y"]),
        width=float(raw["width"]),
        height=float(raw["height"]),
    )


class JsonFragmentProvider:
    """
    Lee un volcado de la capa de texto del visor:
    `{"pages": {"1": [{"text", "x", "y", "width", "height"}, ...], ...}}`.
    """

    def __init__(self, source: Union[str, Path, Mapping[str, Any]]) -> None:
        if isinstance(source, (str, Path)):
            with open(source, "r", encoding="utf-8") as fh:
                data = json.load(fh)
        else:
            data = source
        self._pages: Dict[int, List[TextFragment]] = {}
        for key, items in (data.get("pages") or {}).items():
            page = int(key)
            fragments: List[TextFragment] = []
            for item in items or []:
                try:
                    fragments.append(_fragment_from_dict(item))
                except (KeyError, TypeError, ValueError) as exc:
                    log.warning("Fragmento inválido en la página %d (%s); se omite: %r", page, exc, item)
            self._pages[page] = fragments

    def page_count(self) -> int:
        return max(self._pages, default=0)

    def fragments_for_page(self, page_number: int) -> List[TextFragment]:
        return list(self._pages.get(page_number, []))


def load_provider(path: str) -> FragmentProvider:
    suffix = Path(path).suffix.lower()
    if suffix == ".json":
        return JsonFragmentProvider(path)
    if suffix in HOCR_SUFFIXES:
        return HocrFragmentProvider(path)
    raise ValueError(f"Formato de entrada no soportado: {path!r}")
