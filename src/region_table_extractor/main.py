from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence, Tuple

from .assign import X_TOLERANCE
from .exporters import build_export_payload, table_to_csv, write_json
from .providers import load_provider
from .rows import Y_TOLERANCE
from .session import ExtractionSession
from .spatial import Selection
from .structures import MergedTable

log = logging.getLogger(__name__)

Region = Tuple[int, float, float, float, float]


def regions_to_outputs(
    source_path: str,
    regions: Sequence[Region],
    *,
    json_path: str,
    csv_path: Optional[str] = None,
    y_tolerance: float = Y_TOLERANCE,
    x_tolerance: float = X_TOLERANCE,
) -> Optional[MergedTable]:
    """
    Extrae una tabla por región (página, x1, y1, x2, y2), las combina y escribe
    el JSON de exportación (y opcionalmente un CSV).
    Si ninguna región produce tabla, el JSON queda como `[]`.
    """
    if not Path(source_path).exists():
        raise FileNotFoundError(source_path)

    log.info("Cargando fragmentos desde: %s", source_path)
    provider = load_provider(source_path)
    session = ExtractionSession(provider, y_tolerance=y_tolerance, x_tolerance=x_tolerance)

    for page, x1, y1, x2, y2 in regions:
        if page < 1 or page > provider.page_count():
            log.warning("Página %d fuera de rango (1..%d). Se omite.", page, provider.page_count())
            continue
        session.extract(page, Selection.from_bbox(x1, y1, x2, y2))

    merged = session.merged()
    if merged is None:
        log.warning("Ninguna región produjo una tabla.")

    write_json(build_export_payload(merged, session.last_selection), json_path)
    log.info("JSON escrito en: %s", json_path)
    if csv_path:
        table_to_csv(merged, csv_path)
        log.info("CSV escrito en: %s", csv_path)
    return merged
