# src/region_table_extractor/spatial.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Sequence, Tuple

import numpy as np

if TYPE_CHECKING:
    from .structures import TextFragment

log = logging.getLogger(__name__)

@dataclass(frozen=True)
class Selection:
    """Rectángulo marcado por el usuario. Las esquinas pueden venir en cualquier orden."""
    start_x: float
    start_y: float
    end_x: float
    end_y: float

    @classmethod
    def from_bbox(cls, x1: float, y1: float, x2: float, y2: float) -> "Selection":
        return cls(start_x=x1, start_y=y1, end_x=x2, end_y=y2)

    @property
    def min_x(self) -> float:
        return min(self.start_x, self.end_x)

    @property
    def max_x(self) -> float:
        return max(self.start_x, self.end_x)

    @property
    def min_y(self) -> float:
        return min(self.start_y, self.end_y)

    @property
    def max_y(self) -> float:
        return max(self.start_y, self.end_y)

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def is_degenerate(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def normalized(self) -> Tuple[float, float, float, float]:
        return self.min_x, self.min_y, self.max_x, self.max_y


def filter_fragments(fragments: Sequence["TextFragment"],
                     selection: Selection
                     ) -> List["TextFragment"]:
    """Devuelve los fragmentos cuyo bbox cae COMPLETO dentro de la selección.

    Solapamiento parcial no cuenta. Se conserva el orden de entrada.
    """
    if selection is None or selection.is_degenerate:
        log.debug("Selección vacía o degenerada: no hay fragmentos que filtrar.")
        return []
    if not fragments:
        return []

    coords = np.array([[f.x, f.y, f.width, f.height] for f in fragments], dtype=float)
    xs, ys, ws, hs = coords[:, 0], coords[:, 1], coords[:, 2], coords[:, 3]
    mask = ((xs >= selection.min_x) & (xs + ws <= selection.max_x) &
            (ys >= selection.min_y) & (ys + hs <= selection.max_y))

    inside = [f for f, keep in zip(fragments, mask) if keep]
    log.debug("%d/%d fragmentos dentro de la selección %s", len(inside), len(fragments), selection.normalized())
    return inside
