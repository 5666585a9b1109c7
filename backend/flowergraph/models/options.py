"""Graph rendering options."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from flowergraph.engine.palette import resolve_hue

Luminosity = Literal["bright", "light", "dark", "random"]


class PositionOverride(BaseModel):
    """Explicit center of rotation. Unset coordinates use the computed default."""

    x: float | None = None
    y: float | None = None


class CircleOptions(BaseModel):
    radius: float = Field(default=120.0, gt=0)
    stroke: str = "#cccccc"
    stroke_width: float = Field(default=1.0, ge=0)
    visible: bool = True


class RootsOptions(BaseModel):
    ring_radius: float = Field(default=240.0, gt=0)
    node_radius: float = Field(default=10.0, gt=0)
    show_labels: bool = True


class PetalsOptions(BaseModel):
    node_radius: float = Field(default=5.0, gt=0)
    show_labels: bool = True


class LegendOptions(BaseModel):
    x: float = 10.0
    y: float = 10.0
    columns: int = Field(default=3, ge=1)
    # None → derived from font size / canvas width
    item_height: float | None = None
    column_width: float | None = None
    swatch_size: float | None = None


class GraphOptions(BaseModel):
    width: float = Field(default=600.0, gt=0)
    height: float = Field(default=700.0, gt=0)
    font_size: float = Field(default=6.0, gt=0)
    graph_rotation: float = 45.0
    off_focus_opacity: float = Field(default=0.4, ge=0.0, le=1.0)
    graph_position: PositionOverride = Field(default_factory=PositionOverride)
    hue: str | None = None
    luminosity: Luminosity = "bright"
    seed: int | None = None

    inner_circle: CircleOptions = Field(default_factory=CircleOptions)
    roots: RootsOptions = Field(default_factory=RootsOptions)
    petals: PetalsOptions = Field(default_factory=PetalsOptions)
    legend: LegendOptions = Field(default_factory=LegendOptions)

    model_config = {"frozen": True}

    @field_validator("hue")
    @classmethod
    def _check_hue(cls, value: str | None) -> str | None:
        resolve_hue(value)
        return value
