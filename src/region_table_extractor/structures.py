from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from .spatial import Selection

@dataclass(frozen=True)
class TextFragment:
    """Un fragmento de texto posicionado, tal como lo reporta el visor."""
    text: str
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

@dataclass
class Cell:
    text: str
    x: float = 0
    y: float = 0
    width: float = 0
    height: float = 0

    @property
    def key(self) -> str:
        return (self.text or "").strip()

    @property
    def is_empty(self) -> bool:
        return not self.key

@dataclass
class Row:
    cells: List[Cell] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.cells)

    @property
    def identity(self) -> Optional[str]:
        """Texto de la primera celda; identifica la fila al combinar tablas."""
        if not self.cells:
            return None
        return self.cells[0].key

@dataclass
class Table:
    """Tabla reconstruida. `rows[0]` es siempre la cabecera."""
    rows: List[Row] = field(default_factory=list)
    page_number: Optional[int] = None

    @property
    def is_empty(self) -> bool:
        return not self.rows

    @property
    def header(self) -> Optional[Row]:
        return self.rows[0] if self.rows else None

    @property
    def body(self) -> List[Row]:
        return self.rows[1:]

    def column_names(self) -> List[str]:
        if not self.rows:
            return []
        return [c.key for c in self.rows[0].cells]

    def to_text_rows(self) -> List[List[str]]:
        return [[c.text for c in row.cells] for row in self.rows]

@dataclass
class SelectedTable:
    table: Table
    selection: Optional[Selection] = None

    @property
    def page_number(self) -> Optional[int]:
        return self.table.page_number

# La tabla combinada tiene la misma forma que Table, sin página asociada.
MergedTable = Table
