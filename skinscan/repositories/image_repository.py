from typing import Tuple
import numpy as np
from PIL import Image as PILImage

from ..models.geometry import Rectangle
from ..models.image import RGBAImage, AlphaMask, CHANNELS


class ImageRepository:
    """
    Builds packed images/masks and exposes their pixels as numpy views.
    """

    @staticmethod
    def create_rgba(pixels: np.ndarray, origin: Tuple[int, int] = (0, 0)) -> RGBAImage:
        """
        Args:
            pixels (np.ndarray): (H, W, 3) RGB or (H, W, 4) RGBA, uint8.
            origin: Coordinate of the top-left pixel.
        Returns:
            (RGBAImage): A copy of the pixels, opaque where no alpha was given.
        """
        if pixels.ndim != 3 or pixels.shape[2] not in (3, 4):
            raise ValueError(f"Expected (H, W, 3|4) pixels, got shape {pixels.shape}")
        if pixels.dtype != np.uint8:
            raise ValueError(f"Expected uint8 pixels, got {pixels.dtype}")
        h, w = pixels.shape[:2]
        packed = np.full((h, w, CHANNELS), 255, dtype=np.uint8)
        packed[:, :, :pixels.shape[2]] = pixels
        return RGBAImage(pix=packed.reshape(-1), stride=w * CHANNELS,
                         rect=Rectangle.from_size(w, h, origin=origin))

    @staticmethod
    def from_pil(image: PILImage.Image, origin: Tuple[int, int] = (0, 0)) -> RGBAImage:
        rgba = image if image.mode == "RGBA" else image.convert("RGBA")
        return ImageRepository.create_rgba(np.asarray(rgba, dtype=np.uint8), origin=origin)

    @staticmethod
    def new_rgba(bounds: Rectangle) -> RGBAImage:
        return RGBAImage(pix=np.zeros(bounds.area * CHANNELS, dtype=np.uint8),
                         stride=bounds.dx * CHANNELS, rect=bounds)

    @staticmethod
    def new_mask(bounds: Rectangle) -> AlphaMask:
        """Fully transparent mask covering bounds."""
        return AlphaMask(pix=np.zeros(bounds.area, dtype=np.uint8), stride=bounds.dx, rect=bounds)

    @staticmethod
    def rgba_view(img: RGBAImage) -> np.ndarray:
        """
        Read-only (dy, dx, 4) view of every pixel in img.bounds.
        Row padding beyond dx * 4 bytes is skipped, never copied.
        """
        r = img.rect
        if r.empty():
            return np.zeros((r.dy, r.dx, CHANNELS), dtype=np.uint8)
        step = img.pix.strides[0]
        start = img.pix_offset(r.min_x, r.min_y)
        return np.lib.stride_tricks.as_strided(
            img.pix[start:], shape=(r.dy, r.dx, CHANNELS),
            strides=(img.stride * step, CHANNELS * step, step), writeable=False)

    @staticmethod
    def mask_view(mask: AlphaMask) -> np.ndarray:
        """Writable (dy, dx) view of mask.bounds; writes land in mask.pix."""
        r = mask.rect
        if r.empty():
            return np.zeros((r.dy, r.dx), dtype=np.uint8)
        step = mask.pix.strides[0]
        start = mask.pix_offset(r.min_x, r.min_y)
        return np.lib.stride_tricks.as_strided(
            mask.pix[start:], shape=(r.dy, r.dx), strides=(mask.stride * step, step))

    @staticmethod
    def mask_to_array(mask: AlphaMask) -> np.ndarray:
        return ImageRepository.mask_view(mask).copy()

    @staticmethod
    def mask_to_pil(mask: AlphaMask) -> PILImage.Image:
        return PILImage.fromarray(ImageRepository.mask_to_array(mask))  # 2-D uint8 -> mode "L"
