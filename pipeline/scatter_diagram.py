"""
Scatter Diagram Pipeline
Loads two images, plots their paired channel intensities and writes the result.
"""

import os
import logging
from pathlib import Path
from typing import List, Union
from dotenv import load_dotenv

from models.image import Image
from models.errors import ArgumentError
from models.scatter_canvas import ScatterCanvas
from services.image_service import ImageService
from services.channel_service import ChannelService
from services.scatter_service import ScatterService
from services.combiner_service import CombinerService

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

FALLBACK_SCALE = 50


def read_default_scale() -> int:
    """SCATTER_DEFAULT_SCALE, or 50 when it is unset, non-numeric or not positive."""
    raw = os.getenv("SCATTER_DEFAULT_SCALE", str(FALLBACK_SCALE))
    try:
        scale = int(raw)
    except ValueError:
        scale = 0
    if scale <= 0:
        logger.warning(f"Ignoring SCATTER_DEFAULT_SCALE={raw!r}, using {FALLBACK_SCALE}")
        return FALLBACK_SCALE
    return scale


DEFAULT_SCALE = read_default_scale()


def plot_channels(
    img_a: Image,
    img_b: Image,
    *,
    channel_service: ChannelService = ChannelService(),
    scatter_service: ScatterService = ScatterService(),
) -> List[ScatterCanvas]:
    """
    One canvas per channel; a grayscale pair yields a single canvas.
    The images must already share the same dimensions.
    """
    canvases = []
    for channel in channel_service.channels_for(img_a, img_b):
        samples_a = channel_service.extract(img_a, channel)
        samples_b = channel_service.extract(img_b, channel)
        canvas = scatter_service.plot(samples_a, samples_b, channel)
        logger.info(f"Channel {channel.label}: {canvas.point_count} distinct points")
        canvases.append(canvas)
    return canvases


def scatter_images(
    img_a: Image,
    img_b: Image,
    *,
    scale: int = DEFAULT_SCALE,
    mirror: bool = False,
    image_service: ImageService = None,
    channel_service: ChannelService = ChannelService(),
    scatter_service: ScatterService = ScatterService(),
    combiner_service: CombinerService = CombinerService(),
) -> Image:
    """
    In-memory transform: downscale both images with the same bound,
    validate their sizes, plot every channel and merge the canvases.

    Raises:
        DimensionMismatch: the downscaled images differ in width or height
    """
    image_service = image_service or ImageService()

    small_a = image_service.downscale(img_a, scale)
    small_b = image_service.downscale(img_b, scale)
    width, height = image_service.ensure_same_dimensions(small_a, small_b)
    logger.info(f"Sampling {width}x{height} pixels per image (scale={scale})")

    canvases = plot_channels(
        small_a, small_b,
        channel_service=channel_service,
        scatter_service=scatter_service,
    )
    pixels = combiner_service.combine(canvases, mirror=mirror)
    return image_service.create_image(pixels)


def build_scatter_diagram(
    infile1: Union[str, Path],
    infile2: Union[str, Path],
    outfile: Union[str, Path],
    *,
    scale: int = DEFAULT_SCALE,
    mirror: bool = False,
    image_service: ImageService = None,
) -> Path:
    """
    Full run: load → downscale → validate → plot → combine → save.
    Nothing is written unless every validation step passed.

    Returns:
        Path: the written output file
    """
    image_service = image_service or ImageService()
    outfile = Path(outfile)
    try:
        image_service.check_output_path(outfile)
    except ValueError as err:
        raise ArgumentError(str(err)) from err

    img_a = image_service.load(infile1)
    img_b = image_service.load(infile2)

    result = scatter_images(
        img_a, img_b,
        scale=scale,
        mirror=mirror,
        image_service=image_service,
    )
    result.path = outfile
    image_service.save(result)
    return outfile
