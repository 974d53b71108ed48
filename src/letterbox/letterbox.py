"""
Letterbox compositing.

The source keeps its width; only the height changes to ``floor(width * ratio)``
and the source is centred vertically on a solid black or white canvas.
"""
from typing import Tuple

import numpy as np
from PIL import Image, UnidentifiedImageError
import pillow_heif

from letterbox.config import BLACK, WHITE
from letterbox.errors import DecodeError, LetterboxIOError

# 允许通过显式路径传入 HEIC/HEIF 源文件
pillow_heif.register_heif_opener()

Rect = Tuple[int, int, int, int]


def load_image(path: str) -> Image.Image:
    """Open and fully decode ``path``."""
    try:
        f = open(path, "rb")
    except OSError as e:
        raise LetterboxIOError(e, "opening") from e

    with f:
        try:
            img = Image.open(f)
            img.load()
        except UnidentifiedImageError as e:
            raise DecodeError(e) from e
        except (OSError, ValueError, SyntaxError) as e:
            # truncated / corrupt data
            raise DecodeError(e) from e

    return img


def canvas_size(sw: int, ratio: float) -> Tuple[int, int]:
    """Destination (width, height) for a source of width ``sw``."""
    dw = sw
    dh = int(dw * ratio)
    return dw, dh


def placement(sw: int, sh: int, dw: int, dh: int) -> Rect:
    """
    Rectangle (left, top, right, bottom) the source is drawn into.

    right/bottom are ``dw//2 + dw`` and ``dh//2 + sh`` rather than left+sw
    and top+sh. They only bound the draw together with the canvas and the
    source size, see ``_draw_src``.
    """
    return (
        dw // 2 - sw // 2,
        dh // 2 - sh // 2,
        dw // 2 + dw,
        dh // 2 + sh,
    )


def _draw_src(canvas: np.ndarray, rect: Rect, src: np.ndarray):
    """
    Copy ``src`` into ``canvas`` at ``rect`` without blending.

    The rectangle is clipped to the canvas, then to the source placed at the
    rectangle origin; the source offset moves with whatever was clipped off
    the top/left.
    """
    left, top, right, bottom = rect
    dh, dw = canvas.shape[:2]
    sh, sw = src.shape[:2]

    x0, y0 = max(left, 0), max(top, 0)
    x1, y1 = min(right, dw, left + sw), min(bottom, dh, top + sh)
    if x0 >= x1 or y0 >= y1:
        return

    sx, sy = x0 - left, y0 - top
    canvas[y0:y1, x0:x1] = src[sy:sy + (y1 - y0), sx:sx + (x1 - x0)]


def letterbox(src: Image.Image, white: bool, ratio: float) -> Image.Image:
    sw, sh = src.size
    dw, dh = canvas_size(sw, ratio)

    bg = WHITE if white else BLACK
    canvas = np.empty((dh, dw, 4), dtype=np.uint8)
    canvas[:, :] = bg

    pixels = np.asarray(src.convert("RGBA"))
    _draw_src(canvas, placement(sw, sh, dw, dh), pixels)

    return Image.fromarray(canvas)
