"""Part profile catalogs with bundled data and external override support.

A profile catalog is a YAML file of named part outlines, each a
relative corner path plus how it should be tessellated and extruded.
Profiles are explicit values handed to whatever builds the part; there
is no ambient "current part" to look measures up from.

- Bundled catalogs ship in ``polyround/data/``
- Environment variable override for custom data directories
- User config directory support (~/.config/polyround/)
- Explicit path override in API calls

Environment Variables:
    POLYROUND_PROFILE_PATH: Colon-separated (or semicolon on Windows)
                            paths to directories containing custom YAML
                            catalogs.  These are searched before the
                            user config directory and bundled data.

Example catalog::

    schema_version: "1.0"
    profiles:
      bracket:
        quality: fine
        height: 4
        steps:
          - [0, 0, 1]
          - [30, 0, 2]
          - [0, 12, 2]
          - [-30, 0, 1]
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from polyround.errors import InvalidInputError
from polyround.extrude import Mesh, linear_extrude, rotate_extrude
from polyround.fillet import polygonize
from polyround.geom import Vec2
from polyround.path import AbsolutePoint, CornerStep, resolve
from polyround.quality import DEFAULT_QUALITY, RenderQuality, segments_for

__all__ = [
    "POLYROUND_PROFILE_PATH",
    "PartProfile",
    "load_catalog",
    "get_profile",
    "list_profiles",
    "clear_cache",
]

logger = logging.getLogger(__name__)

# Environment variable name for custom data paths
POLYROUND_PROFILE_PATH = "POLYROUND_PROFILE_PATH"

# Bundled data location (relative to this file)
_BUNDLED_DATA_DIR = Path(__file__).parent / "data"

_PROFILE_KEYS = {
    "steps", "closed", "quality", "segments", "height", "revolve", "description",
}


@dataclass(frozen=True)
class PartProfile:
    """A named outline and how to build it."""

    name: str
    steps: Tuple[CornerStep, ...]
    closed: bool = True
    quality: RenderQuality = DEFAULT_QUALITY
    segments: Optional[int] = None
    height: Optional[float] = None
    revolve: Optional[float] = None
    description: str = ""
    source: Optional[str] = None

    def segments_per_corner(self, override=None) -> int:
        """Segment count from ``override`` (a quality or an integer),
        else the profile's explicit ``segments``, else its quality."""
        if override is not None:
            return segments_for(override)
        if self.segments is not None:
            return self.segments
        return self.quality.segments

    def points(self) -> List[AbsolutePoint]:
        return resolve(self.steps)

    def outline(self, segments=None) -> List[Vec2]:
        return polygonize(self.points(), self.segments_per_corner(segments),
                          closed=self.closed)

    def mesh(self, segments=None) -> Mesh:
        """Extrude (``height``) or revolve (``revolve`` degrees) the
        outline into a mesh."""
        if not self.closed:
            raise InvalidInputError(f"profile '{self.name}' is an open path and cannot be extruded")
        n = self.segments_per_corner(segments)
        outline = polygonize(self.points(), n, closed=True)
        if self.height is not None:
            return linear_extrude(outline, self.height)
        if self.revolve is not None:
            return rotate_extrude(outline, angle=self.revolve, steps=max(8, 4 * n))
        raise InvalidInputError(f"profile '{self.name}' has neither a height nor a revolve angle")


def clear_cache() -> None:
    """Clear all cached catalog data.

    Call this if you modify catalog files or ``POLYROUND_PROFILE_PATH``
    and want to reload.
    """
    _get_data_dirs.cache_clear()
    _load_catalog_cached.cache_clear()


@lru_cache(maxsize=None)
def _get_data_dirs() -> tuple[Path, ...]:
    """Return tuple of data directories to search, in priority order.

    Search order:
        1. Directories from POLYROUND_PROFILE_PATH environment variable
        2. User config directory (~/.config/polyround/)
        3. Bundled data directory
    """
    dirs: List[Path] = []

    env_path = os.environ.get(POLYROUND_PROFILE_PATH)
    if env_path:
        for p in env_path.split(os.pathsep):
            p = p.strip()
            if p:
                path = Path(p).expanduser().resolve()
                if path.is_dir():
                    dirs.append(path)
                else:
                    logger.warning("ignoring missing profile directory %s", path)

    if sys.platform == "win32":
        config_base = Path(os.environ.get("APPDATA", "~")).expanduser()
    else:
        config_base = Path.home() / ".config"

    user_config = config_base / "polyround"
    if user_config.is_dir():
        dirs.append(user_config)

    if _BUNDLED_DATA_DIR.is_dir():
        dirs.append(_BUNDLED_DATA_DIR)

    return tuple(dirs)


@lru_cache(maxsize=32)
def _load_catalog_cached(catalog: str, custom_path_str: Optional[str]) -> Dict[str, PartProfile]:
    """Cached catalog loading (string path for hashability)."""
    custom_path = Path(custom_path_str) if custom_path_str else None
    return _load_catalog_impl(catalog, custom_path)


def _load_catalog_impl(catalog: str, custom_path: Optional[Path]) -> Dict[str, PartProfile]:
    if custom_path:
        if not custom_path.exists():
            raise FileNotFoundError(f"Custom catalog not found: {custom_path}")
        return _load_yaml(custom_path)

    filename = f"{catalog}.yaml"
    for data_dir in _get_data_dirs():
        path = data_dir / filename
        if path.exists():
            return _load_yaml(path)

    searched = [str(d) for d in _get_data_dirs()]
    raise FileNotFoundError(
        f"No profile catalog '{catalog}' found.\n"
        f"Searched directories: {searched}"
    )


def _load_yaml(path: Path) -> Dict[str, PartProfile]:
    """Load and validate a YAML catalog file."""
    logger.debug("loading profile catalog %s", path)
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Invalid catalog format in {path}: expected dict at root")

    schema_version = data.get("schema_version", "1.0")
    if not isinstance(schema_version, str) or not schema_version.startswith("1."):
        raise ValueError(
            f"Unsupported schema version '{schema_version}' in {path}. "
            f"Expected version 1.x"
        )

    profiles = data.get("profiles")
    if not isinstance(profiles, dict):
        raise ValueError(f"Catalog {path} missing required 'profiles' section")

    result = {}
    for name, entry in profiles.items():
        try:
            result[str(name)] = _parse_profile(str(name), entry, path)
        except InvalidInputError as exc:
            raise ValueError(f"Bad profile '{name}' in {path}: {exc}") from exc
    logger.debug("loaded %d profiles from %s", len(result), path)
    return result


def _parse_profile(name: str, entry: Any, path: Path) -> PartProfile:
    if not isinstance(entry, dict):
        raise InvalidInputError("expected a mapping")
    unknown = set(entry) - _PROFILE_KEYS
    if unknown:
        raise InvalidInputError(f"unknown keys {sorted(unknown)}")
    steps = entry.get("steps")
    if not isinstance(steps, list) or not steps:
        raise InvalidInputError("'steps' must be a non-empty list")

    segments = entry.get("segments")
    if segments is not None:
        segments = segments_for(segments)
    height = entry.get("height")
    revolve = entry.get("revolve")
    if height is not None and revolve is not None:
        raise InvalidInputError("'height' and 'revolve' are mutually exclusive")
    closed = entry.get("closed", True)
    if not isinstance(closed, bool):
        raise InvalidInputError(f"'closed' must be true or false, got {closed!r}")

    return PartProfile(
        name=name,
        steps=tuple(CornerStep.coerce(s) for s in steps),
        closed=closed,
        quality=RenderQuality.parse(entry.get("quality", DEFAULT_QUALITY)),
        segments=segments,
        height=None if height is None else float(height),
        revolve=None if revolve is None else float(revolve),
        description=str(entry.get("description", "")),
        source=str(path),
    )


def load_catalog(catalog: str = "parts", path: Optional[Path] = None) -> Dict[str, PartProfile]:
    """Load a profile catalog.

    Args:
        catalog: Catalog name; ``<catalog>.yaml`` is searched for
        path: Optional explicit path to a YAML file (overrides search)

    Returns:
        Mapping of profile name to ``PartProfile``.

    Raises:
        FileNotFoundError: If no catalog is found
        ValueError: If the catalog has an invalid format

    Search order (unless path specified):
        1. $POLYROUND_PROFILE_PATH directories
        2. ~/.config/polyround/
        3. Bundled data
    """
    custom_str = str(path) if path else None
    return dict(_load_catalog_cached(catalog, custom_str))


def get_profile(name: str, catalog: str = "parts", path: Optional[Path] = None) -> PartProfile:
    """Return one profile by name; raises ``KeyError`` if absent."""
    profiles = load_catalog(catalog, path)
    if name not in profiles:
        raise KeyError(
            f"No profile '{name}' in catalog. Available: {sorted(profiles)}"
        )
    return profiles[name]


def list_profiles(catalog: str = "parts", path: Optional[Path] = None) -> List[str]:
    """Return the sorted profile names of a catalog."""
    return sorted(load_catalog(catalog, path))
