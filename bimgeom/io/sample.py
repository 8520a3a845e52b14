"""Bundled sample document: a small single-level 100 m² house."""

from __future__ import annotations
from pathlib import Path

from bimgeom.models import BIMDocument
from bimgeom.io.loader import load_bim

SAMPLE_HOUSE_PATH = Path(__file__).with_name("sample_house.json")


def sample_house() -> BIMDocument:
    return load_bim(SAMPLE_HOUSE_PATH)
