"""Cache statistics for monitoring."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class CacheStats:
    """Point-in-time counters of a DiffCache."""

    entries: int
    size_bytes: int
    max_size_bytes: int
    hits: int
    misses: int
    evictions: int
    expirations: int

    def utilization(self) -> float:
        """Byte budget in use, as a percentage."""
        if self.max_size_bytes == 0:
            return 0.0
        return self.size_bytes / self.max_size_bytes * 100.0

    def summary(self) -> str:
        return (
            f"Diff cache: {self.entries} entries, {self.size_bytes}/{self.max_size_bytes} bytes "
            f"({self.utilization():.1f}%), {self.hits} hits, {self.misses} misses, "
            f"{self.evictions} evicted, {self.expirations} expired"
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
