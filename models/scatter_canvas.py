from __future__ import annotations
from dataclasses import dataclass
import numpy as np
from models.channel import Channel

CANVAS_SIZE = 256  # one cell per 8-bit intensity on each axis


@dataclass
class ScatterCanvas:
    """
    Data object: one channel's scatter bitmap.
    Pixel (x, y) lives at pixels[y, x]; 0 = no point, 255 = point.
    """
    channel: Channel
    pixels: np.ndarray # Shape (256, 256), dtype uint8.

    @property
    def point_count(self) -> int:
        """Number of distinct white points on the canvas."""
        return int(np.count_nonzero(self.pixels))
