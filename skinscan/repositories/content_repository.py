# repositories/content_repository.py
import numpy as np

from ..models.geometry import Rectangle
from ..models.image import RGBAImage
from ..models.pixel_source import PixelSource
from .image_repository import ImageRepository

LEVELS = 256


class ContentRepository:
    """
    Histograms of average luminance Y = (R + G + B) // 3 on 8-bit channels.
    """

    @staticmethod
    def per_pixel_histogram(source: PixelSource, region: Rectangle) -> np.ndarray:
        region = region.intersect(source.bounds)
        hist = [0] * LEVELS
        for y in range(region.min_y, region.max_y):
            for x in range(region.min_x, region.max_x):
                r, g, b, _ = source.rgba(x, y)
                hist[((r >> 8) + (g >> 8) + (b >> 8)) // 3] += 1
        return np.array(hist, dtype=np.int64)

    @staticmethod
    def packed_histogram(source: RGBAImage) -> np.ndarray:
        rgba = ImageRepository.rgba_view(source)
        lum = rgba[:, :, :3].sum(axis=2, dtype=np.uint16) // 3
        return np.bincount(lum.ravel(), minlength=LEVELS).astype(np.int64)

    @staticmethod
    def occupancy_score(hist: np.ndarray, threshold: int) -> int:
        """Buckets holding more than threshold pixels, capped at 255."""
        return min(int(np.count_nonzero(hist > threshold)), 255)
