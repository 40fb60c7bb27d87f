from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Optional, Set, Tuple
import logging
import numpy as np
from PIL import Image

from shapes import Point, Shape

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RasterConfig:
    foreground: Tuple[int, int, int] = (0, 0, 0)
    vectorized: bool = True
    workers: int = 1

    def __post_init__(self):
        if len(self.foreground) != 3:
            raise ValueError("foreground must be an (r, g, b) triple")
        for channel in self.foreground:
            if not 0 <= int(channel) <= 255:
                raise ValueError(f"foreground channel out of range 0..255: {channel}")
        if self.workers < 1:
            raise ValueError("workers must be >= 1")


DEFAULT_RASTER_CONFIG = RasterConfig()


@dataclass
class PixelBuffer:
    """
    Row-major RGBA8 pixels, shape (height, width, 4), indexed as data[y, x].
    """
    data: np.ndarray

    @property
    def width(self) -> int:
        return int(self.data.shape[1])

    @property
    def height(self) -> int:
        return int(self.data.shape[0])

    def is_empty(self) -> bool:
        return self.data.size == 0

    def mask(self) -> np.ndarray:
        return self.data[:, :, 3] == 255

    def opaque_pixels(self) -> Set[Tuple[int, int]]:
        ys, xs = np.nonzero(self.mask())
        return {(int(x), int(y)) for x, y in zip(xs, ys)}

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.data)


def _row_bands(height: int, workers: int) -> List[Tuple[int, int]]:
    n = max(1, min(workers, height))
    step = -(-height // n)
    return [(y0, min(y0 + step, height)) for y0 in range(0, height, step)]


def _fill_band_vectorized(shape: Shape, pixels: np.ndarray, rgba: np.ndarray, y0: int, y1: int) -> None:
    width = pixels.shape[1]
    ys, xs = np.mgrid[y0:y1, 0:width]
    inside = shape.contains_many(xs.astype(float), ys.astype(float))
    pixels[y0:y1][inside] = rgba


def _fill_band_pointwise(shape: Shape, pixels: np.ndarray, rgba: np.ndarray, y0: int, y1: int) -> None:
    width = pixels.shape[1]
    for y in range(y0, y1):
        for x in range(width):
            if shape.contains(Point(x, y)):
                pixels[y, x] = rgba


def rasterize(
    shape: Shape,
    width: int,
    height: int,
    config: Optional[RasterConfig] = None,
) -> PixelBuffer:
    """
    Evaluate `shape` at every integer (x, y) with 0 <= x < width and
    0 <= y < height. Members become opaque foreground pixels; everything
    else stays (0, 0, 0, 0). Negative dimensions are clamped to zero.
    """
    cfg = config or DEFAULT_RASTER_CONFIG
    width = max(0, int(width))
    height = max(0, int(height))
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    if width == 0 or height == 0:
        logger.debug("rasterize: empty grid %dx%d", width, height)
        return PixelBuffer(pixels)

    rgba = np.array([*cfg.foreground, 255], dtype=np.uint8)
    fill = _fill_band_vectorized if cfg.vectorized else _fill_band_pointwise
    bands = _row_bands(height, cfg.workers)
    logger.debug(
        "rasterize: %dx%d, vectorized=%s, bands=%d",
        width, height, cfg.vectorized, len(bands),
    )

    if len(bands) == 1:
        fill(shape, pixels, rgba, 0, height)
    else:
        # bands are disjoint row ranges, so workers never write the same pixel
        with ThreadPoolExecutor(max_workers=len(bands)) as pool:
            futures = [pool.submit(fill, shape, pixels, rgba, y0, y1) for y0, y1 in bands]
            for f in futures:
                f.result()

    buf = PixelBuffer(pixels)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("rasterize: %d opaque pixels", int(buf.mask().sum()))
    return buf
