from __future__ import annotations
from enum import Enum


class Channel(Enum):
    """
    Channel selector for sample extraction.
    The value is the plane index inside an RGB pixel array (None for gray).
    """
    GRAY = None
    RED = 0
    GREEN = 1
    BLUE = 2

    @property
    def label(self) -> str:
        return self.name.lower()


COLOR_CHANNELS = (Channel.RED, Channel.GREEN, Channel.BLUE)
