from __future__ import annotations

import logging

import numpy as np

from models.channel import Channel
from models.scatter_canvas import ScatterCanvas, CANVAS_SIZE

logger = logging.getLogger(__name__)

POINT_VALUE = 255


class ScatterService:
    """
    Plots paired intensities of two images onto a 256x256 canvas.
    *   Works only on sample sequences, never on files.
    *   A point is presence only: repeated hits on one cell change nothing.
    """

    # ─── Internal helpers ──────────────────────────────────────────
    @staticmethod
    def _as_intensities(samples, name: str) -> np.ndarray:
        arr = np.asarray(samples).reshape(-1)
        if arr.dtype == np.uint8:
            return arr
        if arr.size and (not np.issubdtype(arr.dtype, np.integer)
                         or arr.min() < 0 or arr.max() >= CANVAS_SIZE):
            raise ValueError(f"{name} must hold 8-bit intensities in [0, 255]")
        return arr.astype(np.uint8)

    # ─── Public API ────────────────────────────────────────────────
    def plot(self, samples_a, samples_b, channel: Channel = Channel.GRAY) -> ScatterCanvas:
        """
        Set pixel (x=samples_a[k], y=samples_b[k]) to white for every k.

        Args:
            samples_a: intensities from the first image (x axis)
            samples_b: intensities from the second image (y axis)
            channel: which plane the samples came from (bookkeeping only)

        Returns:
            ScatterCanvas: read-only canvas for the channel
        """
        xs = self._as_intensities(samples_a, "samples_a")
        ys = self._as_intensities(samples_b, "samples_b")
        if xs.size != ys.size:
            raise ValueError(
                f"Sample sequences differ in length: {xs.size} vs {ys.size}"
            )

        canvas = np.zeros((CANVAS_SIZE, CANVAS_SIZE), dtype=np.uint8)
        canvas[ys, xs] = POINT_VALUE
        canvas.flags.writeable = False

        result = ScatterCanvas(channel=channel, pixels=canvas)
        logger.debug(f"{channel.label}: {xs.size} samples -> {result.point_count} points")
        return result
