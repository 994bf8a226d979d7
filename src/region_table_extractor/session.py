from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from .assign import X_TOLERANCE
from .exporters import build_export_payload
from .grid_builder import build_table
from .merge import merge_tables
from .providers import FragmentProvider
from .rows import Y_TOLERANCE
from .spatial import Selection
from .store import TableStore
from .structures import MergedTable, SelectedTable, Table

log = logging.getLogger(__name__)


class ExtractionSession:
    """
    Estado de una sesión de extracción sobre un documento: el almacén de
    tablas por página y la última selección que produjo una tabla.

    Se invoca una vez por gesto de selección terminado; no asume ningún ritmo
    de llamadas.
    """

    def __init__(
        self,
        provider: FragmentProvider,
        *,
        y_tolerance: float = Y_TOLERANCE,
        x_tolerance: float = X_TOLERANCE,
    ) -> None:
        self.provider = provider
        self.y_tolerance = y_tolerance
        self.x_tolerance = x_tolerance
        self.store = TableStore()
        self.last_selection: Optional[Selection] = None

    def extract(self, page_number: int, selection: Optional[Selection]) -> Optional[Table]:
        """Extrae la tabla de la región y la guarda si tiene al menos una fila."""
        fragments = self.provider.fragments_for_page(page_number)
        table = build_table(
            fragments,
            selection,
            page_number,
            y_tolerance=self.y_tolerance,
            x_tolerance=self.x_tolerance,
        )
        if table is None or table.is_empty:
            # una extracción vacía no pisa la tabla ya guardada para la página
            return None
        self.store.put(page_number, table, selection)
        self.last_selection = selection
        return table

    def clear(self) -> None:
        self.store.clear()
        self.last_selection = None
        log.info("Se eliminaron todas las tablas seleccionadas.")

    def tables(self) -> List[SelectedTable]:
        return self.store.list()

    def merged(self) -> Optional[MergedTable]:
        return merge_tables(self.store.list())

    def export_payload(self) -> List[Dict[str, Any]]:
        return build_export_payload(self.merged(), self.last_selection)
