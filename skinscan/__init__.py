"""
skinscan

Skin-colour masks and posterization scores for RGB images.

Modules:
    models: Geometry, packed image buffers, accessor protocols, the skin rule
    repositories: Per-pixel and packed-buffer walkers
    services: Path selection and configuration
    pipeline: Batch analysis over a gallery of images
"""
from typing import Optional, Tuple

from .models.geometry import Rectangle
from .models.image import RGBAImage, AlphaMask
from .models.pixel_source import PixelSource, OpacitySink, PILPixelSource, OPAQUE, TRANSPARENT
from .models.skin_thresholds import SkinThresholds
from .repositories.image_repository import ImageRepository
from .services.skin_mask_service import SkinMaskService
from .services.content_service import ContentService

__version__ = '1.0.0'


def skin_mask(src: PixelSource, mask: Optional[OpacitySink] = None) -> Tuple[OpacitySink, float]:
    """Shortcut for SkinMaskService().compute_skin_mask with env thresholds."""
    return SkinMaskService().compute_skin_mask(src, mask)


def content(src: PixelSource, region: Optional[Rectangle] = None) -> int:
    """Shortcut for ContentService().compute_content."""
    return ContentService().compute_content(src, region)


__all__ = [
    'Rectangle',
    'RGBAImage',
    'AlphaMask',
    'PixelSource',
    'OpacitySink',
    'PILPixelSource',
    'OPAQUE',
    'TRANSPARENT',
    'SkinThresholds',
    'ImageRepository',
    'SkinMaskService',
    'ContentService',
    'skin_mask',
    'content',
]
