"""Rule registry — stores and resolves geometry rules."""

from __future__ import annotations

from bimgeom.core.context import LevelContext
from bimgeom.models import GenerationConfig
from bimgeom.rules.base import GeometryRule


def _enabled(rule_id: str, config: GenerationConfig) -> bool:
    """An empty enabled list means every registered rule."""
    if config.enabled_rules and rule_id not in config.enabled_rules:
        return False
    return rule_id not in config.disabled_rules


class RuleRegistry:
    """
    Geometry rules keyed by id.

    For each level, the registry filters rules through the GenerationConfig
    lists and each rule's ``applies``, then orders them by priority with
    dependencies pulled ahead of their dependents.
    """

    def __init__(self) -> None:
        self._rules: dict[str, GeometryRule] = {}

    def register(self, rule: GeometryRule) -> None:
        self._rules[rule.get_id()] = rule

    def list_rules(self) -> list[GeometryRule]:
        return list(self._rules.values())

    def get_applicable_rules(self, context: LevelContext) -> list[GeometryRule]:
        config = context.config
        applicable = [
            rule for rule in self._rules.values()
            if _enabled(rule.get_id(), config) and rule.applies(context)
        ]
        applicable.sort(key=lambda r: r.priority)
        return self._resolve_order(applicable)

    def _resolve_order(self, rules: list[GeometryRule]) -> list[GeometryRule]:
        """Depth-first ordering; dependencies that did not make the cut are ignored."""
        rule_map = {r.get_id(): r for r in rules}
        visited: set[str] = set()
        ordered: list[GeometryRule] = []

        def visit(rule_id: str) -> None:
            if rule_id in visited:
                return
            visited.add(rule_id)
            rule = rule_map.get(rule_id)
            if rule is None:
                return
            for dep_id in rule.dependencies:
                visit(dep_id)
            ordered.append(rule)

        for r in rules:
            visit(r.get_id())

        return ordered


def create_default_registry() -> RuleRegistry:
    """Create a registry with all standard geometry rules."""
    from bimgeom.rules.openings.lintel import DoorLintelRule
    from bimgeom.rules.spaces.backdrop import BuildingFloorRule
    from bimgeom.rules.spaces.floor import SpaceFloorRule
    from bimgeom.rules.walls.edges import EdgeWallRule
    from bimgeom.rules.walls.partition import PartitionWallRule
    from bimgeom.rules.walls.perimeter import PerimeterWallRule

    registry = RuleRegistry()
    registry.register(BuildingFloorRule())
    registry.register(SpaceFloorRule())
    registry.register(PerimeterWallRule())
    registry.register(PartitionWallRule())
    registry.register(EdgeWallRule())
    registry.register(DoorLintelRule())
    return registry
