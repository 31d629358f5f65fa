"""Best-time specific validators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ...constants.platforms import BEST_TIME_PLATFORMS
from ..core.types import Result, Success, Failure
from ..core.validators import validate_blog_id, validate_platform
from .params import BestTimeParams


@dataclass(frozen=True)
class BestTimeRequest:
    """Validated best-time lookup."""

    platform: str
    network: str
    blog_id: Optional[int]


def validate_best_time_params(params: BestTimeParams) -> Result[BestTimeRequest]:
    """Validate best-time parameters.

    Returns Result with the resolved request if valid, or Failure with error.
    """
    network_result = validate_platform(params.platform, BEST_TIME_PLATFORMS)
    if isinstance(network_result, Failure):
        return network_result

    blog_result = validate_blog_id(params.blog_id)
    if isinstance(blog_result, Failure):
        return blog_result

    return Success(BestTimeRequest(
        platform=params.platform,
        network=network_result.value,
        blog_id=blog_result.value,
    ))
