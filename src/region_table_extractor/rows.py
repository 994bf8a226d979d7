# src/region_table_extractor/rows.py
from __future__ import annotations
from typing import List, Optional, Sequence

from .structures import TextFragment

# Máxima diferencia vertical (px) para considerar dos fragmentos en la misma fila.
Y_TOLERANCE = 15

def cluster_rows(fragments: Sequence[TextFragment],
                 y_tolerance: float = Y_TOLERANCE
                 ) -> List[List[TextFragment]]:
    """Agrupa fragmentos en filas horizontales por proximidad vertical.

    Los fragmentos se recorren ordenados por `y`. La tolerancia se mide contra
    el último fragmento admitido (no contra la media de la fila), así que una
    fila puede "derivar" poco a poco si la línea base no es exacta.
    """
    rows: List[List[TextFragment]] = []
    current: List[TextFragment] = []
    last_y: Optional[float] = None

    for frag in sorted(fragments, key=lambda f: f.y):
        if last_y is None or abs(frag.y - last_y) < y_tolerance:
            current.append(frag)
        else:
            if current:
                rows.append(current)
            current = [frag]
        last_y = frag.y

    if current:
        rows.append(current)
    return rows
