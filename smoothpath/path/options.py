from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from smoothpath.errors import InvalidInputError
from smoothpath.geometry.tolerance import EPS_POS
from smoothpath.log import get_logger

logger = get_logger(__name__)

PaddingPolicy = Literal["allow", "reject", "clamp"]
PADDING_POLICIES = ("allow", "reject", "clamp")

# Tangent half-length of the two-point Bezier hull, in units of padding.
DEFAULT_CONTROL_SCALE = 1.2


@dataclass(frozen=True)
class HullOptions:
    padding_policy: PaddingPolicy = "allow"
    min_padding: float = EPS_POS
    control_scale: float = DEFAULT_CONTROL_SCALE

    def __post_init__(self) -> None:
        if self.padding_policy not in PADDING_POLICIES:
            raise ValueError(f"Unknown padding policy '{self.padding_policy}', expected one of {PADDING_POLICIES}")
        if float(self.min_padding) <= 0.0:
            raise ValueError("min_padding must be positive")


DEFAULT_HULL_OPTIONS = HullOptions()


def resolve_padding(padding: float, options: Optional[HullOptions] = None) -> float:
    """Apply the padding policy: pass through, fail, or raise to ``min_padding``."""
    opts = options or DEFAULT_HULL_OPTIONS
    r = float(padding)
    if opts.padding_policy == "allow" or r >= opts.min_padding:
        return r
    if opts.padding_policy == "reject":
        raise InvalidInputError(f"Padding must be at least {opts.min_padding:g}, got {r:g}")
    logger.debug("clamping padding %g to %g", r, opts.min_padding)
    return float(opts.min_padding)
