from pathlib import Path
from typing import Tuple, Union
import os
import logging
import numpy as np
from dotenv import load_dotenv
from models.image import Image
from models.errors import DimensionMismatch
from repositories.image_repository import ImageRepository, INTERPOLATIONS

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


class ImageService:
    """I/O and geometry helpers.  No scatter logic here."""
    def __init__(self, interpolation: str = None):
        self.interpolation = (
            interpolation or os.getenv("SCATTER_RESIZE_INTERPOLATION", "area")
        ).lower()
        if self.interpolation not in INTERPOLATIONS:
            raise ValueError(
                f"Unknown resize interpolation '{self.interpolation}', "
                f"expected one of {sorted(INTERPOLATIONS)}"
            )
        self.image_repository = ImageRepository()

    def create_image(self, pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        return self.image_repository.create_image(pixels, path)

    def load(self, path: Union[str, Path]) -> Image:
        """Load a single image from disk into an Image object."""
        img = self.image_repository.load(path)
        width, height = self.get_image_dimensions(img)
        logger.debug(f"Loaded {path}: {width}x{height}, {'gray' if self.is_grayscale(img) else 'rgb'}")
        return img

    def save(self, image: Image) -> None:
        """
        Business-level method to save the image to its path.
        """
        self.image_repository.save(image)
        logger.info(f"Saved {image.path}")

    def check_output_path(self, path: Union[str, Path]) -> str:
        """Raises ValueError when *path* has no known image extension."""
        return self.image_repository.resolve_format(path)

    def get_image_dimensions(self, img: Image) -> Tuple[int, int]:
        return self.image_repository.retrieve_image_dimensions(img)

    @staticmethod
    def is_grayscale(img: Image) -> bool:
        return img.pixels.ndim == 2

    def downscale(self, img: Image, scale: int) -> Image:
        """
        Shrink *img* to fit inside scale x scale.  Never enlarges.
        """
        if scale <= 0:
            raise ValueError(f"Scale must be a positive integer, got {scale}")
        resized = self.image_repository.resize_to_fit(img, scale, self.interpolation)
        if resized is not img:
            logger.debug(
                f"Downscaled {img.path or 'image'} "
                f"{self.get_image_dimensions(img)} -> {self.get_image_dimensions(resized)}"
            )
        return resized

    def ensure_same_dimensions(self, img_a: Image, img_b: Image) -> Tuple[int, int]:
        """
        Width and height are compared independently; either differing is an error.
        """
        size_a = self.get_image_dimensions(img_a)
        size_b = self.get_image_dimensions(img_b)
        if size_a[0] != size_b[0] or size_a[1] != size_b[1]:
            raise DimensionMismatch(size_a, size_b)
        return size_a
