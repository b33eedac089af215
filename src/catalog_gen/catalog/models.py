"""Pydantic models for catalog documents."""

from datetime import date, datetime, time
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    field_validator,
    model_validator,
)


class CatalogBaseModel(BaseModel):
    """Base for catalog models.

    Keys left empty in YAML (``description:``) load as None; they are dropped
    so the field default applies. Numeric scalars are accepted for str fields.
    """

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_null_keys(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class ModelFile(CatalogBaseModel):
    """A downloadable file belonging to a model."""

    url: str = Field("", description="Download URL")
    size: str = Field("", description="Human readable size (e.g., '1.2 GB')")


class ModelFiles(CatalogBaseModel):
    """File manifest of a model."""

    models: list[ModelFile] = Field(default_factory=list, description="Model weight files")
    proj: ModelFile | None = Field(None, description="Optional projector file")


class ModelCapabilities(CatalogBaseModel):
    """Capability flags of a model."""

    streaming: StrictBool = False
    reasoning: StrictBool = False
    audio: StrictBool = False
    video: StrictBool = False
    tooling: StrictBool = False
    images: StrictBool = False
    embedding: StrictBool = False
    rerank: StrictBool = False


class ModelMetadata(CatalogBaseModel):
    """Descriptive metadata of a model."""

    created: datetime | None = Field(None, description="When the model was created")
    description: str = Field("", description="Free text description")

    @field_validator("created", mode="before")
    @classmethod
    def _date_to_datetime(cls, value: Any) -> Any:
        # YAML loads a bare date (2024-05-01) as a date, not a datetime.
        if isinstance(value, date) and not isinstance(value, datetime):
            return datetime.combine(value, time.min)
        return value


class ModelConfig(CatalogBaseModel):
    """Runtime configuration of a model."""

    context_window: StrictInt = Field(
        0, alias="context-window", description="Context window in tokens, 0 if unspecified"
    )


class CatalogModel(CatalogBaseModel):
    """Model record from a catalog document."""

    id: str = Field(..., description="Model identifier")
    category: str = Field("", description="Model category")
    owned_by: str = Field("", description="Model owner")
    gated_model: StrictBool = Field(False, description="Whether downloads require approval")
    web_page: str = Field("", description="Model web page")
    files: ModelFiles = Field(default_factory=ModelFiles, description="File manifest")
    capabilities: ModelCapabilities = Field(
        default_factory=ModelCapabilities, description="Capability flags"
    )
    metadata: ModelMetadata = Field(default_factory=ModelMetadata, description="Metadata")
    config: ModelConfig = Field(default_factory=ModelConfig, description="Configuration")


class Catalog(CatalogBaseModel):
    """A catalog document."""

    catalog: str = Field("", description="Catalog name")
    models: list[CatalogModel] = Field(default_factory=list, description="Models in the catalog")
