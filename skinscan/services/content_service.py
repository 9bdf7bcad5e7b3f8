import os
import logging
from typing import Optional
from dotenv import load_dotenv

from ..models.geometry import Rectangle
from ..models.image import RGBAImage
from ..models.pixel_source import PixelSource
from ..repositories.content_repository import ContentRepository

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


class ContentService:
    """
    Rates posterization from how many luminance levels are well populated.

    0-64 means few heavily used levels (banded / posterized); values near
    255 mean a smooth spread over the whole range.
    """

    def __init__(self, bucket_threshold: Optional[int] = None):
        if bucket_threshold is None:
            raw = os.getenv("CONTENT_BUCKET_THRESHOLD", "64")
            try:
                bucket_threshold = int(raw)
            except ValueError:
                raise ValueError(f"CONTENT_BUCKET_THRESHOLD must be an int, got {raw!r}") from None
        self.bucket_threshold = bucket_threshold
        self.repository = ContentRepository()

    def compute_content(self, source: PixelSource, region: Optional[Rectangle] = None) -> int:
        """
        Args:
            source: Image to rate.
            region: Pixels to consider, defaults to source.bounds. Parts
                outside the source are ignored.
        Returns:
            (int): Score in [0, 255].
        """
        if region is None:
            region = source.bounds

        if isinstance(source, RGBAImage) and region == source.bounds:
            logger.debug(f"Content over {region}: packed buffer walk")
            hist = self.repository.packed_histogram(source)
        else:
            logger.debug(f"Content over {region}: per-pixel walk ({type(source).__name__})")
            hist = self.repository.per_pixel_histogram(source, region)

        return self.repository.occupancy_score(hist, self.bucket_threshold)
