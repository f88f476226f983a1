"""Diff configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DiffConfig(BaseModel):
    """Defaults applied when a caller does not specify them."""

    model_config = ConfigDict(extra="forbid")

    context_lines: int = Field(3, ge=0, description="Context lines around each hunk")
    default_old_ref: str = Field("HEAD", description="Ref used when no old ref is given")

    @field_validator("default_old_ref")
    @classmethod
    def _non_empty_ref(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("default_old_ref must be a non-empty ref name")
        return v.strip()
