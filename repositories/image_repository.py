from pathlib import Path
from typing import Union, Tuple
import os
import tempfile
import numpy as np
import cv2
from PIL import Image as PILImage
from models.image import Image
from models.errors import DecodeError

INTERPOLATIONS = {
    "area": cv2.INTER_AREA,
    "linear": cv2.INTER_LINEAR,
    "cubic": cv2.INTER_CUBIC,
    "nearest": cv2.INTER_NEAREST,
}


class ImageRepository:
    """
    Handles file I/O and pixel-grid resizing for Image entities.
    """

    @staticmethod
    def create_image(pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        if path is None:
            return Image(pixels)
        return Image(pixels=pixels, path=Path(path))

    @staticmethod
    def retrieve_image_dimensions(img: Image) -> Tuple[int, int]:
        """Returns (width, height)."""
        height, width = img.pixels.shape[:2]
        return width, height

    @staticmethod
    def _to_uint8(arr: np.ndarray, path: Path) -> np.ndarray:
        if arr.dtype == np.uint8:
            return arr
        if arr.dtype == np.uint16:
            return (arr >> 8).astype(np.uint8)
        raise DecodeError(f"Unsupported sample depth {arr.dtype} in {path}")

    @staticmethod
    def _is_gray_bgra(arr: np.ndarray) -> bool:
        """OpenCV expands gray+alpha files to BGRA with three equal colour planes."""
        return bool(np.array_equal(arr[:, :, 0], arr[:, :, 1])
                    and np.array_equal(arr[:, :, 0], arr[:, :, 2]))

    @classmethod
    def load(cls, path: Union[str, Path]) -> Image:
        """
        Decode *path* into an 8-bit Image.
        Grayscale files (with or without alpha) stay 2-D; colour files become RGB (alpha dropped).
        """
        path = Path(path)
        arr = cv2.imread(str(path), cv2.IMREAD_UNCHANGED)
        if arr is None:
            raise DecodeError(f"Image not found or unreadable: {path}")

        arr = cls._to_uint8(arr, path)
        if arr.ndim == 3 and arr.shape[2] in (1, 2):
            # gray, or gray + alpha
            arr = arr[:, :, 0]
        elif arr.ndim == 3 and arr.shape[2] == 4 and cls._is_gray_bgra(arr):
            arr = arr[:, :, 0]
        if arr.ndim == 3:
            if arr.shape[2] == 4:
                arr = cv2.cvtColor(arr, cv2.COLOR_BGRA2RGB)
            elif arr.shape[2] == 3:
                arr = cv2.cvtColor(arr, cv2.COLOR_BGR2RGB)
            else:
                raise DecodeError(f"Unsupported channel count {arr.shape[2]} in {path}")
        return Image(pixels=np.ascontiguousarray(arr), path=path)

    @staticmethod
    def resize_to_fit(image: Image, bound: int, interpolation: str = "area") -> Image:
        """
        Shrink *image* so that neither side exceeds *bound*, preserving aspect.
        Images already inside the bound are returned untouched.
        """
        height, width = image.pixels.shape[:2]
        if width <= bound and height <= bound:
            return image

        factor = min(bound / width, bound / height)
        new_w = max(1, int(round(width * factor)))
        new_h = max(1, int(round(height * factor)))
        resized = cv2.resize(
            image.pixels, (new_w, new_h), interpolation=INTERPOLATIONS[interpolation]
        )
        return Image(pixels=resized, path=image.path)

    @staticmethod
    def resolve_format(path: Union[str, Path]) -> str:
        """Pillow format name for the extension of *path*."""
        suffix = Path(path).suffix.lower()
        fmt = PILImage.registered_extensions().get(suffix)
        if fmt is None:
            raise ValueError(f"Unknown output image extension: '{suffix or path}'")
        PILImage.init()
        if fmt not in PILImage.SAVE:
            raise ValueError(f"Pillow cannot write {fmt} images: '{suffix}'")
        return fmt

    @classmethod
    def save(cls, image: Image) -> None:
        """
        Encode to a temporary sibling file, then rename it over image.path,
        so a failed write never leaves a partial file at the destination.
        """
        target = Path(image.path)
        fmt = cls.resolve_format(target)
        pixels = np.ascontiguousarray(image.pixels)

        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{target.stem}_", suffix=target.suffix, dir=target.parent
        )
        os.close(fd)
        try:
            PILImage.fromarray(pixels).save(tmp_name, format=fmt)
            # mkstemp creates 0600; give the result the usual umask-derived mode
            mask = os.umask(0)
            os.umask(mask)
            os.chmod(tmp_name, 0o666 & ~mask)
            os.replace(tmp_name, target)
        except BaseException:
            if os.path.exists(tmp_name):
                os.remove(tmp_name)
            raise

