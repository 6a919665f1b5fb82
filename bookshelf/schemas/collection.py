"""Collection-level schemas for API requests and responses."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CollectionFileRequest(BaseModel):
    """Schema naming the data file for load and save.

    Only bare file names are accepted; they are resolved inside the
    configured data directory.
    """

    model_config = ConfigDict(strict=True, extra="forbid")

    filename: str | None = Field(
        None,
        min_length=1,
        max_length=255,
        pattern=r"^[A-Za-z0-9_.-]+$",
        description="Bare file name inside the data directory",
    )

    @field_validator("filename")
    @classmethod
    def validate_filename(cls, v: str | None) -> str | None:
        if v is not None and v.strip(".") == "":
            raise ValueError("Filename cannot consist of dots only")
        return v


class CollectionStatus(BaseModel):
    """Schema describing the collection after a collection-level operation."""

    model_config = ConfigDict(strict=True, extra="forbid")

    size: int = Field(..., ge=0, description="Slot count including removed slots")
    live: int = Field(..., ge=0, description="Number of live books")
    affected: int = Field(
        0, ge=0, description="Records loaded, saved, or slots dropped"
    )
    filename: str | None = Field(None, description="Data file involved, if any")
