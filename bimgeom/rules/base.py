"""Abstract base class for geometry rules.

A rule turns one kind of BIM record on a level (walls of a given shape,
doors, spaces) into renderable scene elements. Rules never raise on bad
geometry; records they cannot render are skipped.
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from bimgeom.core.context import LevelContext
from bimgeom.models.scene import SceneElement


class GeometryRule(ABC):
    """
    A scene element producer registered with the rule registry.

    ``priority`` orders rules (lower first) and ``dependencies`` names rule
    ids whose elements must be produced before this one runs.
    """

    priority: int = 100
    dependencies: list[str] = []

    @abstractmethod
    def get_id(self) -> str:
        """Stable id used in GenerationConfig rule lists (e.g. 'wall.perimeter')."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        ...

    @abstractmethod
    def applies(self, context: LevelContext) -> bool:
        """Whether the level holds anything this rule renders."""
        ...

    @abstractmethod
    def generate(self, context: LevelContext) -> list[SceneElement]:
        ...
