from __future__ import annotations
from typing import List, Optional, Sequence

from .assign import X_TOLERANCE
from .structures import Cell, Row

def _match_header_cell(row: Row, header_cell: Cell, x_tolerance: float) -> Optional[Cell]:
    for cell in row.cells:
        if abs(cell.x - header_cell.x) < x_tolerance:
            return cell
    return None

def align_row(row: Row, header: Row, x_tolerance: float = X_TOLERANCE) -> Row:
    """Reordena una fila según las columnas de la cabecera.

    Cada columna toma la primera celda de la fila cuya `x` cae dentro de la
    tolerancia; si no hay ninguna se inserta una celda vacía con la geometría
    horizontal de la cabecera.
    """
    anchor = row.cells[0] if row.cells else None
    cells: List[Cell] = []
    for h in header.cells:
        match = _match_header_cell(row, h, x_tolerance)
        if match is not None:
            cells.append(match)
        else:
            cells.append(Cell(
                text="",
                x=h.x,
                y=anchor.y if anchor else 0,
                width=h.width,
                height=anchor.height if anchor else 0,
            ))
    return Row(cells=cells)

def align_to_header(rows: Sequence[Row], x_tolerance: float = X_TOLERANCE) -> List[Row]:
    """La primera fila es la cabecera; el resto se fuerza a su rejilla de columnas."""
    if not rows:
        return []
    header = rows[0]
    return [header] + [align_row(r, header, x_tolerance) for r in rows[1:]]
