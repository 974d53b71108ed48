import math

from letterbox.errors import AspectParseError


def parse_aspect(s: str) -> float:
    """
    Parse an ``A:B`` aspect string into a height/width factor in (0, 1].

    The larger component always becomes the denominator, so "16:9" and
    "9:16" both give 0.5625. Output is always padded taller-than-wide,
    whichever way round the ratio was written.
    """
    parts = s.split(":")
    if len(parts) != 2:
        raise AspectParseError(f"invalid aspect {s!r}: expected A:B")

    try:
        a = float(parts[0])
        b = float(parts[1])
    except ValueError as e:
        raise AspectParseError(f"invalid aspect {s!r}: {e}") from e

    # float() also accepts "nan" / "inf"
    if not (math.isfinite(a) and math.isfinite(b)) or a <= 0 or b <= 0:
        raise AspectParseError(f"invalid aspect {s!r}: components must be positive numbers")

    if b > a:
        a, b = b, a

    return b / a
