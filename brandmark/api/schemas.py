"""
schemas.py — Pydantic request/response models for the API.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from brandmark.engine.data_models import BrandConcept, StyleType


# =============================================================================
# REQUEST MODELS
# =============================================================================

class BrandConceptSchema(BaseModel):
    """Brand concept as returned by the concept service (camelCase on the wire)."""
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "iconConcept": "a rising mountain peak",
                "fontStyle": "clean geometric sans, wide tracking",
                "logoStyle": "Modern minimal",
                "primaryColor": "#1E3A8A",
                "secondaryColors": ["#F59E0B", "#10B981"],
                "backgroundStyle": "Deep navy gradient",
            }
        },
    )

    icon_concept: str = Field("", alias="iconConcept")
    font_style: str = Field("", alias="fontStyle")
    logo_style: str = Field("", alias="logoStyle")
    primary_color: str = Field("", alias="primaryColor")
    secondary_colors: List[str] = Field(default_factory=list, alias="secondaryColors")
    background_style: str = Field("", alias="backgroundStyle")

    @field_validator(
        "icon_concept", "font_style", "logo_style", "primary_color", "background_style",
        mode="before",
    )
    @classmethod
    def _none_to_empty(cls, value):
        return "" if value is None else value

    @field_validator("secondary_colors", mode="before")
    @classmethod
    def _none_to_list(cls, value):
        return [] if value is None else value

    def to_concept(self) -> BrandConcept:
        """Convert to the engine's BrandConcept."""
        return BrandConcept(
            icon_concept=self.icon_concept,
            font_style=self.font_style,
            logo_style=self.logo_style,
            primary_color=self.primary_color,
            secondary_colors=tuple(self.secondary_colors),
            background_style=self.background_style,
        )


class VariantsRequest(BaseModel):
    """Request to render all ten logo styles."""
    concept: BrandConceptSchema = Field(default_factory=BrandConceptSchema)
    brand_name: str = Field("", description="Display name; empty renders as 'Brand'")


class ExportRequest(BaseModel):
    """Request to download one logo style."""
    concept: BrandConceptSchema = Field(default_factory=BrandConceptSchema)
    brand_name: str = ""
    style_type: StyleType
    format: Literal["svg", "png"] = "svg"


# =============================================================================
# RESPONSE MODELS
# =============================================================================

class StyleSchema(BaseModel):
    """One catalog entry."""
    style_type: str
    style_name: str


class VariantSchema(BaseModel):
    """One rendered logo."""
    style_type: str
    style_name: str
    markup: str


class VariantsResponse(BaseModel):
    """All ten renderings for a concept and name."""
    brand_name: str
    variants: List[VariantSchema]


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    app: str
    version: str
    raster_backend: Optional[bool] = None
