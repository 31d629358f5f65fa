"""Immutable parameter dataclass for the best-time command."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class BestTimeParams:
    """Immutable parameters for a best-time lookup."""

    platform: str
    blog_id: Optional[str]
    json_output: bool

    @classmethod
    def from_cli(
        cls,
        platform: str,
        blog: Optional[str] = None,
        json_output: bool = False,
        **kwargs,
    ) -> "BestTimeParams":
        """Create from CLI arguments."""
        return cls(
            platform=platform.strip().lower(),
            blog_id=blog,
            json_output=json_output,
        )
