# src/region_table_extractor/exporters.py
from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, List, Optional
import csv
import json

import pandas as pd

from .cleaners import clean_text_rows
from .spatial import Selection
from .structures import Table

EXTRACTION_METHOD = "lattice"
# top, left, width, height cuando no hay selección activa al exportar
DEFAULT_EXPORT_AREA = (0, 0, 800, 600)

def _export_area(selection: Optional[Selection]) -> Dict[str, float]:
    if selection is None:
        top, left, width, height = DEFAULT_EXPORT_AREA
    else:
        top, left = selection.min_y, selection.min_x
        width, height = selection.width, selection.height
    return {"top": top, "left": left, "width": width, "height": height}

def build_export_payload(table: Optional[Table], selection: Optional[Selection] = None) -> List[Dict[str, Any]]:
    """
    Arma el JSON de salida: una lista con un único bloque que contiene la tabla combinada.
    Sin tabla devuelve una lista vacía.
    """
    if table is None:
        return []
    block: Dict[str, Any] = {"extraction_method": EXTRACTION_METHOD}
    block.update(_export_area(selection))
    block["data"] = [
        [
            {"top": c.y, "left": c.x, "width": c.width, "height": c.height, "text": c.text}
            for c in row.cells
        ]
        for row in table.rows
    ]
    block["spec_index"] = 0
    return [block]

def write_json(payload: List[Dict[str, Any]], json_path: str) -> None:
    Path(json_path).parent.mkdir(parents=True, exist_ok=True)
    with open(json_path, "w", encoding="utf-8") as fh:
        json.dump(payload, fh, indent=2, ensure_ascii=False)

def rows_to_csv(rows: List[List[str]], header: List[str], csv_path: str) -> None:
    with open(csv_path, "w", encoding="utf-8-sig", newline="") as f:
        w = csv.writer(f)
        if header:
            w.writerow(header)
        w.writerows(rows)

def table_to_csv(table: Optional[Table], csv_path: str) -> None:
    Path(csv_path).parent.mkdir(parents=True, exist_ok=True)
    if table is None or table.is_empty:
        rows_to_csv([], [], csv_path)
        return
    grid = clean_text_rows(table.to_text_rows())
    rows_to_csv(grid[1:], grid[0], csv_path)

def table_to_dataframe(table: Optional[Table]) -> pd.DataFrame:
    """Cabecera como columnas, filas de datos como registros (todo texto)."""
    if table is None or table.is_empty:
        return pd.DataFrame()
    grid = clean_text_rows(table.to_text_rows())
    return pd.DataFrame(grid[1:], columns=grid[0], dtype=str)
