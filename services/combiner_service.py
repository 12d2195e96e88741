from typing import Sequence
import numpy as np
from models.scatter_canvas import ScatterCanvas


class CombinerService:
    """
    Merges per-channel canvases into the final bitmap.
    """

    @staticmethod
    def mirror(pixels: np.ndarray) -> np.ndarray:
        """Flip top-to-bottom so the origin sits bottom-left."""
        return np.ascontiguousarray(pixels[::-1])

    def combine(self, canvases: Sequence[ScatterCanvas], mirror: bool = False) -> np.ndarray:
        """
        1 canvas  -> (256, 256) single-channel bitmap
        3 canvases (R, G, B order) -> (256, 256, 3) RGB bitmap
        """
        if len(canvases) == 1:
            merged = canvases[0].pixels.copy()
        elif len(canvases) == 3:
            merged = np.dstack([c.pixels for c in canvases])
        else:
            raise ValueError(f"Expected 1 or 3 canvases, got {len(canvases)}")

        if mirror:
            merged = self.mirror(merged)
        return merged
