"""Diff cache configuration."""

from pydantic import BaseModel, ConfigDict, Field


class CacheConfig(BaseModel):
    """Byte budget and expiry for the in-memory diff cache."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = Field(True, description="Serve repeated comparisons from memory")
    max_size_bytes: int = Field(64 * 1024 * 1024, gt=0, description="Total size budget for cached diffs")
    ttl_seconds: float = Field(3600.0, gt=0, description="Seconds before an entry expires")
