"""Wall editor state — an injected container with pure reducer updates.

The geometry core never touches this state; it only receives the walls a
snapshot holds.
"""

from __future__ import annotations
import uuid
from typing import Callable

from pydantic import BaseModel, ConfigDict

from bimgeom.models import BrickVariant, Point2D, Wall, WallMaterial

EDITABLE_FIELDS = frozenset({"start", "end", "height", "thickness", "material", "brick_variant"})


class WallsState(BaseModel):
    model_config = ConfigDict(frozen=True)

    walls: tuple[Wall, ...] = ()
    selected_wall_id: str | None = None


def seed_walls() -> tuple[Wall, ...]:
    return (
        Wall(
            id="wall-1",
            start=Point2D(x=1, y=1),
            end=Point2D(x=5, y=1),
            height=2.5,
            thickness=0.2,
            material=WallMaterial.BRICK,
            brick_variant=BrickVariant.A,
        ),
        Wall(
            id="wall-2",
            start=Point2D(x=5, y=1),
            end=Point2D(x=5, y=4),
            height=2.5,
            thickness=0.15,
            material=WallMaterial.DRYWALL,
        ),
    )


def new_wall(start: Point2D, end: Point2D, **overrides: object) -> Wall:
    """A wall with editor defaults and a fresh id."""
    return Wall(id=f"wall-{uuid.uuid4().hex[:8]}", start=start, end=end, **overrides)


# ── Reducers ────────────────────────────────────────────────────────────

def add_wall(state: WallsState, wall: Wall) -> WallsState:
    return state.model_copy(update={"walls": state.walls + (wall,)})


def update_wall(state: WallsState, wall_id: str, **changes: object) -> WallsState:
    """Apply editable field changes to the wall with the given id."""
    unknown = set(changes) - EDITABLE_FIELDS
    if unknown:
        raise ValueError(f"Fields not editable: {', '.join(sorted(unknown))}")
    walls = tuple(
        Wall.model_validate({**w.model_dump(), **changes}) if w.id == wall_id else w
        for w in state.walls
    )
    return state.model_copy(update={"walls": walls})


def remove_wall(state: WallsState, wall_id: str) -> WallsState:
    selected = None if state.selected_wall_id == wall_id else state.selected_wall_id
    return state.model_copy(update={
        "walls": tuple(w for w in state.walls if w.id != wall_id),
        "selected_wall_id": selected,
    })


def select_wall(state: WallsState, wall_id: str | None) -> WallsState:
    return state.model_copy(update={"selected_wall_id": wall_id})


class WallStore:
    """Holds the current editor state and applies reducers to it."""

    def __init__(self, state: WallsState | None = None) -> None:
        self.state = state if state is not None else WallsState(walls=seed_walls())

    def dispatch(self, reducer: Callable[..., WallsState], *args: object, **kwargs: object) -> WallsState:
        self.state = reducer(self.state, *args, **kwargs)
        return self.state

    @property
    def walls(self) -> tuple[Wall, ...]:
        return self.state.walls

    @property
    def selected(self) -> Wall | None:
        for w in self.state.walls:
            if w.id == self.state.selected_wall_id:
                return w
        return None

    def get_wall(self, wall_id: str) -> Wall | None:
        for w in self.state.walls:
            if w.id == wall_id:
                return w
        return None
