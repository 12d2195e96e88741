# services/channel_service.py
from typing import List
import cv2
import numpy as np
from models.image import Image
from models.channel import Channel, COLOR_CHANNELS


class ChannelService:
    """
    Turns an Image into flat per-channel sample sequences.
    """

    @staticmethod
    def channels_for(img_a: Image, img_b: Image) -> List[Channel]:
        """
        A pair of single-channel images is compared on one gray plane,
        anything else on the three colour planes.
        """
        if img_a.pixels.ndim == 2 and img_b.pixels.ndim == 2:
            return [Channel.GRAY]
        return list(COLOR_CHANNELS)

    @staticmethod
    def extract(img: Image, channel: Channel) -> np.ndarray:
        """
        Returns a 1-D uint8 array of length W*H in row-major order.
        A grayscale image answers every channel with its gray plane.
        """
        pixels = img.pixels
        if pixels.ndim == 2:
            plane = pixels
        elif channel is Channel.GRAY:
            plane = cv2.cvtColor(np.ascontiguousarray(pixels), cv2.COLOR_RGB2GRAY)
        else:
            plane = pixels[:, :, channel.value]
        return np.ascontiguousarray(plane, dtype=np.uint8).reshape(-1)
