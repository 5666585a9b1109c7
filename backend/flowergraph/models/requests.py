"""API request models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from flowergraph.models.options import GraphOptions


class HoverRequest(BaseModel):
    label: str | None = Field(default=None, description="Hovered petal label")
    types: list[str] = Field(default_factory=list, description="Hovered type set")


class LegendRequest(BaseModel):
    records: list[dict[str, Any]] = Field(..., description="Raw records")
    label_key: str = Field(default="label", description="Record key holding the label")
    type_key: str = Field(default="types", description="Record key holding the type list")


class RenderRequest(LegendRequest):
    options: GraphOptions = Field(default_factory=GraphOptions)
    hover: HoverRequest | None = Field(
        default=None,
        description="Hover state to apply before rendering",
    )
