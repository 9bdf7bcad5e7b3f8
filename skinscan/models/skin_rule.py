# models/skin_rule.py
"""
The RGB skin heuristic, scalar and vectorised.

Both forms take 8-bit red/green and the same SkinThresholds, so the
per-pixel walker and the buffer walker cannot drift apart.
The ratio test is written as R < ratio * G: G == 0 is simply non-skin.
"""
from __future__ import annotations
import numpy as np

from .skin_thresholds import SkinThresholds, DEFAULT_THRESHOLDS


def is_skin(r: int, g: int, thresholds: SkinThresholds = DEFAULT_THRESHOLDS) -> bool:
    if r < thresholds.min_r:
        return False
    delta = r - g
    if delta < thresholds.min_rg_delta or delta > thresholds.max_rg_delta:
        return False
    return r < thresholds.max_rg_ratio * g


def skin_pixels(r: np.ndarray, g: np.ndarray, thresholds: SkinThresholds = DEFAULT_THRESHOLDS) -> np.ndarray:
    """
    Args
    ----
    r, g : np.ndarray  same shape, uint8 (any integer dtype works)

    Returns
    -------
    bool array of the same shape, True where the pixel is skin.
    """
    r = r.astype(np.int32)
    g = g.astype(np.int32)
    delta = r - g
    return ((r >= thresholds.min_r)
            & (delta >= thresholds.min_rg_delta)
            & (delta <= thresholds.max_rg_delta)
            & (r < thresholds.max_rg_ratio * g))
