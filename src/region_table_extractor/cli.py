from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from .assign import X_TOLERANCE
from .main import Region, regions_to_outputs
from .rows import Y_TOLERANCE

log = logging.getLogger(__name__)


def _parse_region(values: Sequence[str]) -> Region:
    page = int(values[0])
    x1, y1, x2, y2 = map(float, values[1:])
    if page < 1:
        raise ValueError("La página debe ser >= 1")
    if x1 == x2 or y1 == y2:
        raise ValueError("Región inválida: el rectángulo no tiene área")
    return page, x1, y1, x2, y2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Reconstruye tablas a partir de regiones marcadas sobre páginas y las combina en una sola."
    )
    parser.add_argument("source", type=str, help="Fragmentos de entrada: archivo .hocr o volcado .json del visor")
    parser.add_argument("--region", action="append", nargs=5, required=True,
                        metavar=("PAGE", "X1", "Y1", "X2", "Y2"),
                        help="Región de la tabla en una página. Puede repetirse (una por página).")
    parser.add_argument("--json", dest="json_path", default="combined-table.json",
                        help="Ruta del JSON de salida (default: combined-table.json)")
    parser.add_argument("--csv", dest="csv_path", help="Ruta opcional para un CSV de la tabla combinada")
    parser.add_argument("--y-tolerance", type=float, default=Y_TOLERANCE,
                        help=f"Tolerancia vertical entre filas en px (default: {Y_TOLERANCE})")
    parser.add_argument("--x-tolerance", type=float, default=X_TOLERANCE,
                        help=f"Tolerancia horizontal entre celdas en px (default: {X_TOLERANCE})")
    parser.add_argument("--loglevel", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Nivel de verbosidad del log (default: INFO)")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.loglevel, format="%(asctime)s - %(levelname)s - %(message)s")

    try:
        regions = [_parse_region(r) for r in args.region]
    except ValueError as e:
        parser.error(str(e))

    log.info("ENTRADA: %s", args.source)
    try:
        regions_to_outputs(
            args.source,
            regions,
            json_path=args.json_path,
            csv_path=args.csv_path,
            y_tolerance=args.y_tolerance,
            x_tolerance=args.x_tolerance,
        )
        log.info("✔ Proceso completado.")
    except FileNotFoundError:
        log.error("Error: No se encontró el archivo de entrada: %s", args.source)
        sys.exit(1)
    except Exception as e:
        log.error("Ocurrió un error inesperado: %s", e, exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
