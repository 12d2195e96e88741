from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import numpy as np


@dataclass
class Image:
    """
    Simple data object: 8-bit pixels (+ optional source path for bookkeeping).
    No OpenCV logic outside the repository layer.
    """
    pixels: np.ndarray # Shape (H, W) for grayscale or (H, W, 3) in RGB order, dtype uint8.
    path: Path | None = None # Source (or destination) of the image.
