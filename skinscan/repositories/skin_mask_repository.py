# repositories/skin_mask_repository.py
from ..models.image import RGBAImage, AlphaMask
from ..models.pixel_source import PixelSource, OpacitySink, OPAQUE
from ..models.skin_rule import is_skin, skin_pixels
from ..models.skin_thresholds import SkinThresholds
from .image_repository import ImageRepository


class SkinMaskRepository:
    """
    The two skin-mask walkers. Each returns the number of pixels it marked.

    • per_pixel – any source, any sink, sink may cover part of the source.
    • packed    – RGBAImage + AlphaMask with identical bounds only.
    """

    @staticmethod
    def per_pixel(source: PixelSource, mask: OpacitySink, thresholds: SkinThresholds) -> int:
        # Mask cells outside the source have no pixel to classify.
        region = mask.bounds.intersect(source.bounds)
        n = 0
        for y in range(region.min_y, region.max_y):
            for x in range(region.min_x, region.max_x):
                r, g, _, _ = source.rgba(x, y)
                if is_skin(r >> 8, g >> 8, thresholds):
                    mask.set_opacity(x, y, OPAQUE)
                    n += 1
        return n

    @staticmethod
    def packed(source: RGBAImage, mask: AlphaMask, thresholds: SkinThresholds) -> int:
        if source.bounds != mask.bounds:
            raise ValueError(f"packed walk needs equal bounds, got {source.bounds} and {mask.bounds}")
        rgba = ImageRepository.rgba_view(source)
        skin = skin_pixels(rgba[:, :, 0], rgba[:, :, 1], thresholds)
        ImageRepository.mask_view(mask)[skin] = OPAQUE
        return int(skin.sum())
