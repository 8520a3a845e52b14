"""Loader for BIM JSON documents.

Accepts the nested ``building.levels`` schema and the alternate schema with
``levels`` at the document root, and resolves every wall record to a
perimeter or partition wall once, here, so the geometry code never has to
look at which optional field is populated.
"""

from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Union

from pydantic import ValidationError

from bimgeom.models import BIMDocument

logger = logging.getLogger(__name__)

DEFAULT_LEVEL_HEIGHT = 2800


class BIMSchemaError(ValueError):
    """The document cannot be rendered: bad JSON or a missing required section."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.errors = errors or []


def _resolve_wall(raw: Any) -> Any:
    """
    Tag a raw wall record with its shape kind.

    A perimeter-typed record with a polygon is an outer footprint ring; then a
    centerline path wins; any remaining polygon is rendered edge by edge.
    """
    if not isinstance(raw, dict) or "kind" in raw:
        return raw
    polygon = raw.get("polygon")
    if raw.get("type") == "perimeter" and isinstance(polygon, list) and polygon:
        return {**raw, "kind": "perimeter"}
    path = raw.get("path")
    if isinstance(path, list) and len(path) >= 2:
        return {**raw, "kind": "partition"}
    return {**raw, "kind": "edges"}


def _usable_wall(raw: Any) -> bool:
    """Walls with no usable geometry are dropped instead of failing the document."""
    if not isinstance(raw, dict):
        return True
    path = raw.get("path")
    polygon = raw.get("polygon")
    has_path = isinstance(path, list) and len(path) >= 2
    has_polygon = isinstance(polygon, list) and len(polygon) >= 2
    return has_path or has_polygon


def _number(value: Any, default: float) -> Any:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    return default


def _list(value: Any) -> list:
    return value if isinstance(value, list) else []


def _normalize_level(raw: Any, index: int) -> Any:
    if not isinstance(raw, dict):
        return raw
    walls = []
    for wall in _list(raw.get("walls")):
        if not _usable_wall(wall):
            logger.warning("Skipping wall %s: no path or polygon", wall.get("id"))
            continue
        walls.append(_resolve_wall(wall))
    return {
        **raw,
        "level": _number(raw.get("level"), index),
        "elevation": _number(raw.get("elevation"), 0),
        "height": _number(raw.get("height"), DEFAULT_LEVEL_HEIGHT),
        "spaces": _list(raw.get("spaces")),
        "walls": walls,
        "doors": _list(raw.get("doors")),
        "windows": _list(raw.get("windows")),
    }


def parse_bim(source: Union[str, bytes, dict[str, Any]]) -> BIMDocument:
    """
    Parse a BIM document from JSON text or an already-decoded mapping.

    Raises:
        BIMSchemaError: if the JSON is invalid, ``project`` is missing, no
            levels are found in either schema variant, or a record fails
            validation.
    """
    if isinstance(source, (str, bytes)):
        try:
            data = json.loads(source)
        except json.JSONDecodeError as e:
            raise BIMSchemaError(f"Invalid JSON: {e}") from e
    else:
        data = source

    if not isinstance(data, dict) or data.get("project") is None:
        raise BIMSchemaError("Invalid BIM: missing project")

    building = data.get("building")
    if not isinstance(building, dict):
        building = {}
    levels = _list(building.get("levels"))

    # Alternate schema: levels at the document root
    if not levels:
        levels = _list(data.get("levels"))

    if not levels:
        raise BIMSchemaError("Invalid BIM: missing project or building.levels")

    normalized = {
        "project": data["project"],
        "building": {
            **building,
            "levels": [_normalize_level(lev, i) for i, lev in enumerate(levels)],
        },
    }
    try:
        return BIMDocument.model_validate(normalized)
    except ValidationError as e:
        raise BIMSchemaError(
            "Invalid BIM: schema validation failed",
            errors=e.errors(include_url=False, include_context=False, include_input=False),
        ) from e


def load_bim(path: Union[str, Path]) -> BIMDocument:
    """Read and parse a BIM JSON file."""
    text = Path(path).read_text(encoding="utf-8")
    return parse_bim(text)
