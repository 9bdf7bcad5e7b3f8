import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from ..models.image import RGBAImage, AlphaMask
from ..services.skin_mask_service import SkinMaskService
from ..services.content_service import ContentService

logger = logging.getLogger(__name__)


@dataclass
class ImageAnalysis:
    """Skin mask, skin coverage and content score of one image."""
    image: RGBAImage
    mask: AlphaMask
    coverage: float  # fraction of pixels classified as skin
    content: int     # posterization score, 0-255


def analyze_gallery(
    gallery: Iterable[RGBAImage],
    skin_mask_service: Optional[SkinMaskService] = None,
    content_service: Optional[ContentService] = None,
) -> List[ImageAnalysis]:
    skin_mask_service = skin_mask_service or SkinMaskService()
    content_service = content_service or ContentService()

    results = []
    for i, img in enumerate(gallery):
        mask, coverage = skin_mask_service.compute_skin_mask(img)
        content = content_service.compute_content(img)
        logger.info(f"Image {i} {img.bounds.dx}x{img.bounds.dy}: "
                    f"skin coverage {coverage:.3f}, content {content}")
        results.append(ImageAnalysis(image=img, mask=mask, coverage=coverage, content=content))

    return results
