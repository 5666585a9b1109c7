"""POST /api/legend and /api/render — flower graph over posted records."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, HTTPException

from flowergraph.config import settings
from flowergraph.engine.accessors import KeyAccessor
from flowergraph.engine.graph import FlowerGraph
from flowergraph.models.requests import LegendRequest, RenderRequest
from flowergraph.models.responses import (
    LegendEntryModel,
    LegendResponse,
    NodeModel,
    PositionModel,
    ProjectedRecordModel,
    RenderResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _build_graph(req: LegendRequest, graph: FlowerGraph | None = None) -> FlowerGraph:
    accessor = KeyAccessor(label_key=req.label_key, type_key=req.type_key)
    try:
        if graph is None:
            graph = FlowerGraph(accessor=accessor)
        graph.set_data(req.records, accessor)
    except (KeyError, TypeError) as e:
        # Records the accessor cannot read are a client error, not a server one
        raise HTTPException(status_code=422, detail=f"Unreadable record: {e!r}") from e
    return graph


def _legend_models(graph: FlowerGraph) -> list[LegendEntryModel]:
    return [LegendEntryModel(type=e.type, color=e.color, count=e.count) for e in graph.legend]


@router.post("/legend", response_model=LegendResponse)
async def legend(req: LegendRequest) -> LegendResponse:
    graph = _build_graph(req)
    if settings.palette_seed is not None:
        graph.update_options(seed=settings.palette_seed)
    return LegendResponse(legend=_legend_models(graph))


@router.post("/render", response_model=RenderResponse)
async def render(req: RenderRequest) -> RenderResponse:
    start = time.perf_counter()

    options = req.options
    if options.seed is None and settings.palette_seed is not None:
        options = options.model_copy(update={"seed": settings.palette_seed})
    graph = _build_graph(req, FlowerGraph(options=options))

    if req.hover is not None:
        if req.hover.label is not None:
            graph.hover.enter_label(req.hover.label)
        if req.hover.types:
            graph.hover.enter_types(req.hover.types)

    result = graph.render()
    elapsed = (time.perf_counter() - start) * 1000
    logger.info("Render: %d records in %.1fms", len(req.records), elapsed)

    return RenderResponse(
        svg=result.svg,
        legend=_legend_models(graph),
        records=[ProjectedRecordModel(label=r.label, types=list(r.type_names)) for r in result.records],
        roots=[NodeModel(id=r.type, angle=r.angle, x=r.x, y=r.y) for r in result.roots],
        petals=[NodeModel(id=p.label, angle=p.angle, x=p.x, y=p.y) for p in result.petals],
        position=PositionModel(x=result.position.x, y=result.position.y),
        processing_time_ms=round(elapsed, 1),
    )
