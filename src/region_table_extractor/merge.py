"""
Combinación de las tablas guardadas (una por página) en una sola tabla.

Las columnas de salida son la unión de todas las cabeceras: primero las de la
primera tabla, luego las nuevas en el orden en que aparecen. Las filas se
identifican por el texto de su primera celda; filas con la misma clave se
fusionan y un valor vacío nunca borra uno ya conocido.

El proceso es secuencial (tabla a tabla, fila a fila): el relleno de celdas
vacías sólo ve las filas fusionadas antes, así que el orden del almacén
influye en el resultado.
"""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from .structures import Cell, MergedTable, Row, SelectedTable

log = logging.getLogger(__name__)


def _empty_cell(anchor: Optional[Cell]) -> Cell:
    return Cell(
        text="",
        x=0,
        y=anchor.y if anchor else 0,
        width=0,
        height=anchor.height if anchor else 0,
    )


def _collect_headers(entries: List[SelectedTable]) -> Tuple[List[str], List[str]]:
    all_headers: List[str] = []
    common_headers: List[str] = []
    for i, entry in enumerate(entries):
        names = entry.table.column_names()
        for name in names:
            if name not in all_headers:
                all_headers.append(name)
            if i == 0 and name not in common_headers:
                common_headers.append(name)
    return all_headers, common_headers


def final_column_order(all_headers: List[str], common_headers: List[str]) -> List[str]:
    order = list(common_headers)
    order.extend(h for h in all_headers if h not in order)
    return order


def _candidate_row(row: Row,
                   table_headers: List[str],
                   all_headers: List[str],
                   existing: Optional[Row]
                   ) -> Row:
    anchor = row.cells[0] if row.cells else None
    cells: List[Cell] = []
    for pos, column in enumerate(all_headers):
        if column not in table_headers:
            cells.append(_empty_cell(anchor))
            continue

        src_idx = table_headers.index(column)
        source = row.cells[src_idx] if src_idx < len(row.cells) else None
        if source is not None and not source.is_empty:
            cells.append(source)
            continue

        # celda vacía: intentar recuperarla de una fila ya fusionada con la misma clave
        recovered = existing.cells[pos] if existing is not None else None
        if recovered is not None and not recovered.is_empty:
            cells.append(recovered)
        else:
            cells.append(_empty_cell(anchor))
    return Row(cells=cells)


def merge_tables(selected_tables: Iterable[SelectedTable]) -> Optional[MergedTable]:
    """Combina las tablas del almacén. Devuelve None si no hay ninguna.

    Las celdas con valor de la tabla combinada son los mismos objetos `Cell`
    de las tablas de origen (no copias): modificar una celda combinada también
    modifica la tabla guardada. Sólo la cabecera y las celdas vacías sintéticas
    son objetos nuevos.
    """
    entries = list(selected_tables)
    if not entries:
        return None

    all_headers, common_headers = _collect_headers(entries)
    order = final_column_order(all_headers, common_headers)

    merged: List[Row] = []
    by_key: Dict[str, int] = {}

    for entry in entries:
        table = entry.table
        table_headers = table.column_names()
        if not table_headers:
            log.warning("La tabla de la página %s no tiene cabecera; se ignora al combinar.", entry.page_number)
            continue

        for row in table.body:
            key = row.identity
            if key is None:
                continue
            idx = by_key.get(key)
            existing = merged[idx] if idx is not None else None
            candidate = _candidate_row(row, table_headers, all_headers, existing)

            if existing is None:
                by_key[key] = len(merged)
                merged.append(candidate)
                continue

            for pos, cell in enumerate(candidate.cells):
                if not cell.is_empty:
                    existing.cells[pos] = cell

    positions = [all_headers.index(h) for h in order]
    header = Row(cells=[Cell(text=h) for h in order])
    body = [Row(cells=[r.cells[p] for p in positions]) for r in merged]

    log.info("Tabla combinada: %d tablas, %d columnas, %d filas de datos.", len(entries), len(order), len(body))
    return MergedTable(rows=[header] + body, page_number=None)
