# src/region_table_extractor/cleaners.py
from __future__ import annotations
from typing import Iterable, List

def clean_cell_text(text: str) -> str:
    """Limpia el texto de una celda individual."""
    return (text or "").strip()

def join_texts(parts: Iterable[str]) -> str:
    """Une los textos de varios fragmentos con espacios, en el orden recibido."""
    return clean_cell_text(" ".join(p or "" for p in parts))

def clean_text_rows(grid: List[List[str]]) -> List[List[str]]:
    return [[clean_cell_text(cell) for cell in row] for row in grid]
