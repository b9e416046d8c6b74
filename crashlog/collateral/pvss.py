"""Product/variant/stepping/security tuples identifying a product."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, order=True)
class PVSS:
    """Uniquely identifies a product; undefined elements are set to "all"."""

    product: str = "all"
    variant: str = "all"
    stepping: str = "all"
    security: str = "green"

    def to_path(self) -> Path:
        """Relative directory of this product, skipping "." and ".." components."""
        parts = (self.product, self.variant, self.stepping, self.security)
        return Path(*(p for p in parts if p not in (".", "..")))

    def __str__(self) -> str:
        return f"{self.product}/{self.variant}/{self.stepping}/{self.security}"