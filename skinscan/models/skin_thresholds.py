from __future__ import annotations
from dataclasses import dataclass
import os


def _env_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ValueError(f"{name} must be a {cast.__name__}, got {raw!r}") from None


@dataclass(frozen=True)
class SkinThresholds:
    """
    Value-object holding the RGB skin rule, in 8-bit channel units.
    Shared by the per-pixel and the buffer walkers.
    """
    min_r: int = 75            # reject reds darker than this
    min_rg_delta: int = 20     # R - G lower bound (greyish below)
    max_rg_delta: int = 90     # R - G upper bound (saturated above)
    max_rg_ratio: float = 2.5  # R / G must stay strictly below

    def __post_init__(self):
        if self.min_rg_delta > self.max_rg_delta:
            raise ValueError(
                f"min_rg_delta ({self.min_rg_delta}) exceeds max_rg_delta ({self.max_rg_delta})")
        if self.max_rg_ratio <= 0:
            raise ValueError(f"max_rg_ratio must be positive, got {self.max_rg_ratio}")

    @classmethod
    def from_env(cls) -> "SkinThresholds":
        return cls(
            min_r=_env_number("SKIN_MIN_R", cls.min_r, int),
            min_rg_delta=_env_number("SKIN_MIN_RG_DELTA", cls.min_rg_delta, int),
            max_rg_delta=_env_number("SKIN_MAX_RG_DELTA", cls.max_rg_delta, int),
            max_rg_ratio=_env_number("SKIN_MAX_RG_RATIO", cls.max_rg_ratio, float),
        )


DEFAULT_THRESHOLDS = SkinThresholds()
