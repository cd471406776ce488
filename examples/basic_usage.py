"""Basic gradientmap usage examples.

Run directly with:
    python examples/basic_usage.py [input_image] [output_image]
"""
import sys

import numpy as np
from PIL import Image

from gradientmap import Color, GradientMap, PixelBufferView, get_backend


def demonstrate_pixels() -> None:
    # The defaults map bright to white and dark to black.
    gmap = GradientMap()
    print("Default gradient:", gmap)
    print("Mid gray ->", gmap.map_pixel(128, 128, 128))

    # A sepia-like duotone with a half-transparent shadow color.
    duotone = GradientMap(start=Color(255, 240, 200), end=Color.from_argb(200, 43, 26, 1))
    print("Mid gray (duotone) ->", duotone.map_pixel(128, 128, 128))


def demonstrate_buffer() -> None:
    # 2x2 RGB image with 2 bytes of padding after each row.
    stride = 2 * 3 + 2
    raw = bytearray([
        255, 255, 255, 0, 0, 0, 9, 9,
        128, 64, 32, 10, 200, 90, 9, 9,
    ])
    view = PixelBufferView(raw, stride=stride, pixel_size=3, image_width=2, image_height=2)
    GradientMap(end=Color(0, 0, 80)).apply(view)
    print("Recolored raw buffer:", list(raw))


def demonstrate_image(src: str, dst: str) -> None:
    image = np.array(Image.open(src).convert("RGBA"))
    height, width = image.shape[:2]

    # Only the left half is recolored.
    gmap = GradientMap(start="#ffe9b0", end=(20, 10, 60, 255))
    gmap.apply_array(image, region=(0, 0, width // 2, height))
    Image.fromarray(image, "RGBA").save(dst)
    print(f"Wrote {dst} using the {get_backend().value} kernel")


if __name__ == "__main__":
    demonstrate_pixels()
    demonstrate_buffer()
    if len(sys.argv) == 3:
        demonstrate_image(sys.argv[1], sys.argv[2])
