# src/region_table_extractor/grid_builder.py
from __future__ import annotations
import logging
from typing import List, Optional, Sequence

from .assign import X_TOLERANCE, group_cells
from .columns import align_to_header
from .rows import Y_TOLERANCE, cluster_rows
from .spatial import Selection, filter_fragments
from .structures import Row, Table, TextFragment

log = logging.getLogger(__name__)

def build_rows(fragments: Sequence[TextFragment],
               y_tolerance: float = Y_TOLERANCE,
               x_tolerance: float = X_TOLERANCE
               ) -> List[Row]:
    """Filas -> celdas -> alineación contra la cabecera."""
    proto_rows = cluster_rows(fragments, y_tolerance=y_tolerance)
    log.debug("Se agruparon los fragmentos en %d filas.", len(proto_rows))
    rows = [group_cells(pr, x_tolerance=x_tolerance) for pr in proto_rows]
    return align_to_header(rows, x_tolerance=x_tolerance)

def build_table(fragments: Sequence[TextFragment],
                selection: Optional[Selection],
                page_number: int,
                *,
                y_tolerance: float = Y_TOLERANCE,
                x_tolerance: float = X_TOLERANCE
                ) -> Optional[Table]:
    """
    Reconstruye la tabla de una página a partir de los fragmentos dentro de la selección.
    Devuelve None si la selección es degenerada o no contiene fragmentos.
    """
    if selection is None or selection.is_degenerate:
        log.warning("Página %d: selección ausente o sin área. No se genera tabla.", page_number)
        return None

    inside = filter_fragments(fragments, selection)
    if not inside:
        log.warning("Página %d: ningún fragmento dentro de la selección. No se genera tabla.", page_number)
        return None

    rows = build_rows(inside, y_tolerance=y_tolerance, x_tolerance=x_tolerance)
    n_cols = len(rows[0].cells) if rows else 0
    log.info("Página %d: tabla con %d filas y %d columnas.", page_number, len(rows), n_cols)
    return Table(rows=rows, page_number=page_number)
