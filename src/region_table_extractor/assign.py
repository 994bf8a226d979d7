from __future__ import annotations
from typing import List, Optional, Sequence

from .cleaners import join_texts
from .structures import Cell, Row, TextFragment

# Máximo hueco horizontal (px) entre fragmentos de una misma celda.
X_TOLERANCE = 5

def _close_group(group: List[TextFragment]) -> Cell:
    first, last = group[0], group[-1]
    return Cell(
        text=join_texts(f.text for f in group),
        x=first.x,
        y=first.y,
        width=last.right - first.x,
        height=max(f.height for f in group),
    )

def group_cells(row_fragments: Sequence[TextFragment],
                x_tolerance: float = X_TOLERANCE
                ) -> Row:
    """Agrupa los fragmentos de una fila en celdas según el hueco horizontal.

    `last_right` sigue a cada fragmento, tanto si se unió al grupo actual
    como si abrió uno nuevo.
    """
    cells: List[Cell] = []
    group: List[TextFragment] = []
    last_right: Optional[float] = None

    for frag in sorted(row_fragments, key=lambda f: f.x):
        if last_right is None or frag.x - (last_right + x_tolerance) < 0:
            group.append(frag)
        else:
            if group:
                cells.append(_close_group(group))
            group = [frag]
        last_right = frag.right

    if group:
        cells.append(_close_group(group))
    return Row(cells=cells)
