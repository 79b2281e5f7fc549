import colorsys
from numbers import Real

# Scores from 0 to 1000 are spread over hues 140 (green) to 0 (red)
SCORE_MIN = 0
SCORE_MAX = 1000
HUE_BEST = 140
HUE_WORST = 0
HUE_CLAMP = (0, 120)


def _check_numbers(*values) -> None:
    for value in values:
        if not isinstance(value, Real) or isinstance(value, bool):
            raise TypeError("Invalid parameter types.")


def clamp(x, low, high):
    """Clamp ``x`` between ``low`` and ``high``."""
    _check_numbers(x, low, high)
    return low if x < low else high if x > high else x


def normalize(x, low, high):
    """Normalize ``x`` from ``low, high`` to ``0, 1``."""
    _check_numbers(x, low, high)
    return (x - low) / (high - low)


def expand(x, low, high):
    """Expand a normalized ``x`` to ``low, high``."""
    _check_numbers(x, low, high)
    return x * (high - low) + low


def translate(x, a, b, c, d):
    """Translate ``x`` from the number line ``a, b`` to ``c, d``."""
    return expand(normalize(x, a, b), c, d)


def score_hue(score: int) -> float:
    hue = translate(score, SCORE_MIN, SCORE_MAX, HUE_BEST, HUE_WORST)
    return clamp(hue, *HUE_CLAMP)


def score_color(score: int) -> str:
    return f"hsl({score_hue(score):g},100%,45%)"


def score_rgb(score: int) -> str:
    """Same colour as ``score_color`` in a form rich understands."""
    r, g, b = colorsys.hls_to_rgb(score_hue(score) / 360, 0.45, 1.0)
    return f"rgb({round(r * 255)},{round(g * 255)},{round(b * 255)})"
