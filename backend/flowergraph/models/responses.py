"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class LegendEntryModel(BaseModel):
    type: str
    color: str
    count: int


class ProjectedRecordModel(BaseModel):
    label: str
    types: list[str] = Field(default_factory=list)


class NodeModel(BaseModel):
    id: str
    angle: float
    x: float
    y: float


class PositionModel(BaseModel):
    x: float
    y: float


class LegendResponse(BaseModel):
    legend: list[LegendEntryModel] = Field(default_factory=list)


class RenderResponse(BaseModel):
    svg: str
    legend: list[LegendEntryModel] = Field(default_factory=list)
    records: list[ProjectedRecordModel] = Field(default_factory=list)
    roots: list[NodeModel] = Field(default_factory=list)
    petals: list[NodeModel] = Field(default_factory=list)
    position: PositionModel
    processing_time_ms: float = 0.0
