"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from bimgeom.models import BrickLayout
from bimgeom.io.loader import BIMSchemaError
from bimgeom.services.geometry_service import GeometryService
from bimgeom.api.schemas import (
    CutRequest, CutResponse, RuleInfo, SceneRequest, SceneResponse,
    WallMetricsResponse, WallRequest,
)

router = APIRouter()

# Shared service instance
_service = GeometryService()


@router.post("/scene", response_model=SceneResponse)
async def build_scene(request: SceneRequest) -> SceneResponse:
    """Derive renderable geometry for every level of a BIM document."""
    try:
        scene = _service.build_scene(request.document, request.config)
    except BIMSchemaError as e:
        raise HTTPException(
            status_code=422,
            detail={"message": e.message, "errors": e.errors},
        ) from e

    return SceneResponse(
        scene=scene,
        level_count=len(scene.levels),
        element_count=sum(lv.stats.total_elements for lv in scene.levels),
    )


@router.post("/walls/metrics", response_model=WallMetricsResponse)
async def wall_metrics(request: WallRequest) -> WallMetricsResponse:
    return WallMetricsResponse(**_service.wall_metrics(request.wall))


@router.post("/walls/bricks", response_model=BrickLayout)
async def wall_bricks(request: WallRequest) -> BrickLayout:
    """Brick instance transforms for a wall; check count.truncated for capacity."""
    return _service.brick_layout(request.wall)


@router.post("/segments/cut", response_model=CutResponse)
async def cut_segment(request: CutRequest) -> CutResponse:
    segments = _service.cut_segment(
        request.p0, request.p1, request.doors, request.dist_threshold_mm,
    )
    return CutResponse(segments=segments)


@router.get("/rules", response_model=list[RuleInfo])
async def list_rules() -> list[RuleInfo]:
    """List all available geometry rules."""
    return [RuleInfo(**r) for r in _service.list_rules()]


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
