import argparse
import logging
import sys
from typing import List, Optional, Sequence

from tilesymmetry import (
    InvalidPositionName,
    SymmetryOptions,
    TileCatalog,
    format_placement,
    parse_arms,
    placement_from_names,
    verify_orbits,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _lookup(catalog: TileCatalog, text: str) -> bool:
    names = parse_arms(text)
    if len(names) > catalog.arms:
        logger.warning(
            "Read %d arm(s) but %d were requested; ignoring the last %d",
            len(names),
            catalog.arms,
            len(names) - catalog.arms,
        )
        names = names[: catalog.arms]
    elif len(names) < catalog.arms:
        logger.error("Incomplete tile %r: %d arm(s) required", text, catalog.arms)
        return False

    placement = placement_from_names(names)
    representative = catalog.lookup(placement)
    if representative is None:
        logger.error("No representative found for %s", format_placement(placement))
        return False
    print(f"{format_placement(placement)} is equivalent to the tile {format_placement(representative)}")
    return True


def _print_orbit_report(catalog: TileCatalog) -> None:
    report = verify_orbits(catalog.arms, catalog.options, representatives=catalog.tiles)
    for record in report.records:
        print("")
        print(format_placement(record.representative))
        print(f"Orbits:\t{record.orbit_size}")
        print(f"Stabilizers:\t{record.stabilizer_count}")
    print(f"Total Orbits:\t{report.total_orbit_size}")
    print("Tiles NOT generated through rotation:")
    if not report.unreached:
        print("None")
    for placement in report.unreached:
        print(format_placement(placement))


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="List the distinct n-armed cuboctahedron tiles up to rotation"
    )
    parser.add_argument("arms", type=int, help="Number of arms per tile (0-12)")
    parser.add_argument(
        "--no-extended",
        action="store_true",
        help="Ignore the special-case rotations of hexagonal-plane tiles",
    )
    parser.add_argument(
        "--orbit-stabilizer",
        action="store_true",
        help="Print orbit and stabilizer counts for every tile",
    )
    parser.add_argument(
        "--lookup",
        action="append",
        default=[],
        metavar="ARMS",
        help='Report the listed tile equivalent to ARMS, e.g. "a1, b2" (repeatable)',
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    if not 0 <= args.arms <= 12:
        parser.error(f"arms must be between 0 and 12, got {args.arms}")

    options = SymmetryOptions(use_extended_rotations=not args.no_extended)
    catalog = TileCatalog(args.arms, options)

    print("Tile types:")
    for tile in catalog:
        print(format_placement(tile))
    print(f"There are {len(catalog)} unique tile types with {args.arms} arms")

    if args.orbit_stabilizer:
        _print_orbit_report(catalog)

    failures: List[str] = []
    for text in args.lookup:
        try:
            if not _lookup(catalog, text):
                failures.append(text)
        except InvalidPositionName as exc:
            logger.error("%s", exc)
            failures.append(text)
    if failures:
        raise SystemExit(2)


if __name__ == "__main__":
    main(sys.argv[1:])
