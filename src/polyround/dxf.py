"""
DXF export of polygons and filleted outlines.

Outlines are written with the ezdxf library as LWPOLYLINE entities so
CAD tools can import them as a single closed profile and extrude it.
``write_outline()`` keeps fillets exact by storing each one as a polyline
arc segment (a *bulge*, `tan(sweep/4)`) instead of tessellating it.

Copyright (c) 2026 polyround contributors
All rights reserved (MIT License)
"""

from __future__ import annotations

import logging
from math import tan
from pathlib import Path
from typing import Iterable, List, Sequence, Tuple, Union

import ezdxf

from polyround.errors import InvalidInputError
from polyround.fillet import corners
from polyround.geom import vclose

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
BulgePoint = Tuple[float, float, float]


def _new_document(layer: str):
    doc = ezdxf.new(dxfversion='R2010', setup=False)
    doc.header['$MEASUREMENT'] = 1  # metric
    doc.header['$INSUNITS'] = 4  # millimeters
    if layer not in doc.layers:
        doc.layers.new(layer, dxfattribs={'color': 7})
    return doc


def _target(path: PathLike) -> Path:
    target = Path(path)
    if target.suffix.lower() != '.dxf':
        target = target.with_name(target.name + '.dxf')
    return target


def bulge_points(points: Iterable, closed=True) -> List[BulgePoint]:
    """Convert radius-tagged points into ``(x, y, bulge)`` polyline
    vertices, one arc segment per fillet."""
    result: List[BulgePoint] = []

    def _append(x, y, bulge):
        # two fillets meeting mid-edge share a tangent point; keep the
        # later vertex since it carries the following arc's bulge
        if result and vclose(result[-1][:2], (x, y)):
            result.pop()
        result.append((x, y, bulge))

    for p, f in corners(points, closed=closed):
        if f is None:
            _append(p.x, p.y, 0.0)
        else:
            _append(f.start[0], f.start[1], tan(f.sweep / 4.0))
            _append(f.end[0], f.end[1], 0.0)
    if closed:
        while len(result) > 1 and vclose(result[0][:2], result[-1][:2]):
            result.pop()
    return result


def write_polygon(vertices: Sequence[Sequence[float]], path: PathLike,
                  layer: str = 'PATHS') -> Path:
    """Write a flat polygon as a closed LWPOLYLINE.

    Returns the path written, with a ``.dxf`` suffix added if missing.
    """
    pts = [(float(v[0]), float(v[1])) for v in vertices]
    if len(pts) < 3:
        raise InvalidInputError(f"a polygon needs at least 3 vertices, got {len(pts)}")
    target = _target(path)
    doc = _new_document(layer)
    doc.modelspace().add_lwpolyline(pts, format='xy', close=True,
                                    dxfattribs={'layer': layer})
    doc.saveas(target)
    logger.info("wrote %d-vertex polygon to %s", len(pts), target)
    return target


def write_outline(points: Iterable, path: PathLike, closed=True,
                  layer: str = 'PATHS') -> Path:
    """Write radius-tagged points as an LWPOLYLINE with exact fillet arcs.

    Fillets are validated exactly as ``polygonize()`` validates them, so
    oversized radii raise ``FilletTooLargeError`` before anything is
    written.
    """
    vertices = bulge_points(points, closed=closed)
    target = _target(path)
    doc = _new_document(layer)
    doc.modelspace().add_lwpolyline(vertices, format='xyb', close=closed,
                                    dxfattribs={'layer': layer})
    doc.saveas(target)
    logger.info("wrote %d-vertex outline to %s", len(vertices), target)
    return target


__all__ = ["bulge_points", "write_polygon", "write_outline"]
