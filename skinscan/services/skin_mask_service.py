import logging
from typing import Optional, Tuple
from dotenv import load_dotenv

from ..models.image import RGBAImage, AlphaMask
from ..models.pixel_source import PixelSource, OpacitySink
from ..models.skin_thresholds import SkinThresholds
from ..repositories.image_repository import ImageRepository
from ..repositories.skin_mask_repository import SkinMaskRepository

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


class SkinMaskService:
    """
    Marks skin-coloured pixels of a source image in an opacity mask.

    Takes the packed-buffer walk when the source is an RGBAImage, the mask
    an AlphaMask (or absent) and both cover the same bounds; every other
    combination goes through the per-pixel walk with the same rule.
    """

    def __init__(self, thresholds: Optional[SkinThresholds] = None):
        self.thresholds = thresholds or SkinThresholds.from_env()
        self.repository = SkinMaskRepository()
        self.image_repository = ImageRepository()

    @staticmethod
    def can_use_packed(source: PixelSource, mask: OpacitySink) -> bool:
        return (isinstance(source, RGBAImage) and isinstance(mask, AlphaMask)
                and source.bounds == mask.bounds)

    def compute_skin_mask(
        self,
        source: PixelSource,
        mask: Optional[OpacitySink] = None,
    ) -> Tuple[OpacitySink, float]:
        """
        Args:
            source: Image to classify. Only read.
            mask: Sink to mark; a transparent AlphaMask over source.bounds
                is allocated when omitted. Cells of non-skin pixels keep
                whatever they held.
        Returns:
            (mask, coverage): the marked mask (same instance if one was given)
            and the fraction of mask pixels classified as skin.
        """
        if mask is None:
            mask = self.image_repository.new_mask(source.bounds)

        region = mask.bounds
        if self.can_use_packed(source, mask):
            logger.debug(f"Skin mask over {region}: packed buffer walk")
            n = self.repository.packed(source, mask, self.thresholds)
        else:
            if isinstance(source, RGBAImage) and isinstance(mask, AlphaMask):
                logger.debug(f"Mask bounds {region} differ from source {source.bounds}, "
                             f"falling back to per-pixel walk")
            else:
                logger.debug(f"Skin mask over {region}: per-pixel walk "
                             f"({type(source).__name__} -> {type(mask).__name__})")
            n = self.repository.per_pixel(source, mask, self.thresholds)

        if region.empty():
            return mask, 0.0
        return mask, n / region.area
