"""Command line access to polyround profile catalogs.

    polyround list [--catalog FILE]
    polyround outline NAME [--catalog FILE] [--quality Q | --segments N]
    polyround export NAME OUT.dxf [--catalog FILE] [--arcs]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from polyround.dxf import write_outline, write_polygon
from polyround.errors import PolyroundError
from polyround.profiles import get_profile, load_catalog
from polyround.quality import RenderQuality

logger = logging.getLogger(__name__)


def setup_logging(level: int = logging.INFO) -> None:
    """Attach a stderr handler to the ``polyround`` logger."""
    root = logging.getLogger("polyround")
    root.setLevel(level)
    if root.hasHandlers():
        root.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    ))
    root.addHandler(handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polyround",
        description="Resolve and export filleted part outlines.",
    )
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging.")
    sub = parser.add_subparsers(dest="command", required=True)

    def _catalog_arg(p):
        p.add_argument("--catalog", type=Path, default=None,
                       help="Profile catalog YAML file (default: search path).")

    p_list = sub.add_parser("list", help="List the profiles in a catalog.")
    _catalog_arg(p_list)

    p_outline = sub.add_parser("outline", help="Print a profile's polygon vertices.")
    p_outline.add_argument("name", help="Profile name.")
    _catalog_arg(p_outline)
    density = p_outline.add_mutually_exclusive_group()
    density.add_argument("--quality", choices=[q.name.lower() for q in RenderQuality],
                         help="Render quality (overrides the profile).")
    density.add_argument("--segments", type=int,
                         help="Segments per filleted corner (overrides the profile).")

    p_export = sub.add_parser("export", help="Write a profile outline to DXF.")
    p_export.add_argument("name", help="Profile name.")
    p_export.add_argument("output", type=Path, help="Output DXF file.")
    _catalog_arg(p_export)
    p_export.add_argument("--arcs", action="store_true",
                          help="Write fillets as exact arcs instead of tessellating.")
    return parser


def _list(args) -> int:
    for name, profile in sorted(load_catalog(path=args.catalog).items()):
        if profile.description:
            print(f"{name}\t{profile.description}")
        else:
            print(name)
    return 0


def _outline(args) -> int:
    profile = get_profile(args.name, path=args.catalog)
    override = args.segments if args.segments is not None else args.quality
    for x, y in profile.outline(override):
        print(f"{x:.6f} {y:.6f}")
    return 0


def _export(args) -> int:
    profile = get_profile(args.name, path=args.catalog)
    if args.arcs:
        target = write_outline(profile.points(), args.output, closed=profile.closed)
    else:
        if not profile.closed:
            print(f"profile '{profile.name}' is an open path; use --arcs", file=sys.stderr)
            return 1
        target = write_polygon(profile.outline(), args.output)
    print(target)
    return 0


_COMMANDS = {
    "list": _list,
    "outline": _outline,
    "export": _export,
}


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        setup_logging(logging.DEBUG)
    try:
        return _COMMANDS[args.command](args)
    except (PolyroundError, KeyError, FileNotFoundError, ValueError) as exc:
        logger.debug("command %s failed", args.command, exc_info=True)
        message = exc.args[0] if isinstance(exc, KeyError) and exc.args else exc
        print(f"polyround: error: {message}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover - manual invocation
    sys.exit(main())
