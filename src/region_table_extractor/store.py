from __future__ import annotations
import dataclasses
import logging
from typing import Dict, Iterator, List, Optional

from .spatial import Selection
from .structures import SelectedTable, Table

log = logging.getLogger(__name__)


class TableStore:
    """Como mucho una tabla por página; re-extraer una página reemplaza la anterior.

    La clave es el número de página recibido en `put`, no el de la tabla. Se
    guarda una copia con esa página, la tabla del llamador no se modifica.
    El orden de inserción es el orden en que el combinador recorre las tablas.
    """

    def __init__(self) -> None:
        self._entries: Dict[int, SelectedTable] = {}

    def put(self, page_number: int, table: Table, selection: Optional[Selection] = None) -> None:
        replaced = self._entries.pop(page_number, None) is not None
        stored = dataclasses.replace(table, page_number=page_number)
        self._entries[page_number] = SelectedTable(table=stored, selection=selection)
        log.debug("Tabla de la página %d %s.", page_number, "reemplazada" if replaced else "guardada")

    def clear(self) -> None:
        self._entries = {}

    def list(self) -> List[SelectedTable]:
        return list(self._entries.values())

    def get(self, page_number: int) -> Optional[SelectedTable]:
        return self._entries.get(page_number)

    def pages(self) -> List[int]:
        return list(self._entries)

    def __contains__(self, page_number: object) -> bool:
        return page_number in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[SelectedTable]:
        return iter(list(self._entries.values()))
