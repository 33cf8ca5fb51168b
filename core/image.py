from typing import Sequence
import numpy as np
from PIL import Image
from core.math import Vec3


def quantize(value: float) -> int:
    """Map an intensity in [0, 1] to a byte, rounding to nearest."""
    return int(max(0.0, min(255.0, 0.5 + 255.0 * value)))


class ImageSink:
    """
    Square PPM (RGB, ``P6``) or PGM (grayscale, ``P5``) output file.

    The file is opened on entry so an unwritable path fails before any
    rendering. Rows are accepted in render order, geometric top row first,
    and the image is encoded with Pillow when the block exits cleanly.
    """

    def __init__(self, path: str, size: int, grayscale: bool = False):
        self.path = path
        self.size = size
        self.grayscale = grayscale
        channels = 1 if grayscale else 3
        self.pixels = np.zeros((size, size, channels), dtype=np.uint8)
        self.rows_written = 0
        self._fp = None

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc_type is None:
            self.close()
        elif self._fp is not None:
            self._fp.close()
            self._fp = None
        return False

    def open(self):
        self._fp = open(self.path, "wb")

    def write_row(self, colors: Sequence[Vec3]):
        if self._fp is None:
            raise RuntimeError("image sink is not open")
        if self.rows_written >= self.size:
            raise RuntimeError(f"image already has all {self.size} rows")
        if len(colors) != self.size:
            raise ValueError(f"expected {self.size} pixels in a row, got {len(colors)}")

        row = self.pixels[self.rows_written]
        for i, col in enumerate(colors):
            if self.grayscale:
                row[i, 0] = quantize((col.x + col.y + col.z) / 3.0)
            else:
                row[i] = (quantize(col.x), quantize(col.y), quantize(col.z))
        self.rows_written += 1

    def to_image(self) -> Image.Image:
        if self.grayscale:
            return Image.fromarray(self.pixels[:, :, 0])
        return Image.fromarray(self.pixels)

    def close(self):
        if self._fp is None:
            return
        try:
            self.to_image().save(self._fp, format="PPM")
            self._fp.flush()
        finally:
            self._fp.close()
            self._fp = None
