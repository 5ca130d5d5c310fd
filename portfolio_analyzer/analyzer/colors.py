"""
Color parsing and WCAG luminance math.

Resolves CSS color text (named colors, hex, rgb/rgba, hsl/hsla) to RGB samples
and computes relative luminance and contrast ratios.
"""

import math
import re
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .models import BackgroundLayer


@dataclass(frozen=True)
class ColorSample:
    """An opaque sRGB color, each channel an integer in [0, 255]."""
    r: int
    g: int
    b: int

    def __post_init__(self):
        for channel in (self.r, self.g, self.b):
            if not isinstance(channel, int) or isinstance(channel, bool):
                raise ValueError(f"Channel must be an integer, got {channel!r}")
            if not 0 <= channel <= 255:
                raise ValueError(f"Channel out of range [0, 255]: {channel}")

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def css(self) -> str:
        """Serialize the way browsers report computed colors."""
        return f"rgb({self.r}, {self.g}, {self.b})"


# CSS Color Module Level 4 named colors
NAMED_COLORS = {
    'aliceblue': '#f0f8ff', 'antiquewhite': '#faebd7', 'aqua': '#00ffff',
    'aquamarine': '#7fffd4', 'azure': '#f0ffff', 'beige': '#f5f5dc',
    'bisque': '#ffe4c4', 'black': '#000000', 'blanchedalmond': '#ffebcd',
    'blue': '#0000ff', 'blueviolet': '#8a2be2', 'brown': '#a52a2a',
    'burlywood': '#deb887', 'cadetblue': '#5f9ea0', 'chartreuse': '#7fff00',
    'chocolate': '#d2691e', 'coral': '#ff7f50', 'cornflowerblue': '#6495ed',
    'cornsilk': '#fff8dc', 'crimson': '#dc143c', 'cyan': '#00ffff',
    'darkblue': '#00008b', 'darkcyan': '#008b8b', 'darkgoldenrod': '#b8860b',
    'darkgray': '#a9a9a9', 'darkgreen': '#006400', 'darkgrey': '#a9a9a9',
    'darkkhaki': '#bdb76b', 'darkmagenta': '#8b008b', 'darkolivegreen': '#556b2f',
    'darkorange': '#ff8c00', 'darkorchid': '#9932cc', 'darkred': '#8b0000',
    'darksalmon': '#e9967a', 'darkseagreen': '#8fbc8f', 'darkslateblue': '#483d8b',
    'darkslategray': '#2f4f4f', 'darkslategrey': '#2f4f4f', 'darkturquoise': '#00ced1',
    'darkviolet': '#9400d3', 'deeppink': '#ff1493', 'deepskyblue': '#00bfff',
    'dimgray': '#696969', 'dimgrey': '#696969', 'dodgerblue': '#1e90ff',
    'firebrick': '#b22222', 'floralwhite': '#fffaf0', 'forestgreen': '#228b22',
    'fuchsia': '#ff00ff', 'gainsboro': '#dcdcdc', 'ghostwhite': '#f8f8ff',
    'gold': '#ffd700', 'goldenrod': '#daa520', 'gray': '#808080',
    'green': '#008000', 'greenyellow': '#adff2f', 'grey': '#808080',
    'honeydew': '#f0fff0', 'hotpink': '#ff69b4', 'indianred': '#cd5c5c',
    'indigo': '#4b0082', 'ivory': '#fffff0', 'khaki': '#f0e68c',
    'lavender': '#e6e6fa', 'lavenderblush': '#fff0f5', 'lawngreen': '#7cfc00',
    'lemonchiffon': '#fffacd', 'lightblue': '#add8e6', 'lightcoral': '#f08080',
    'lightcyan': '#e0ffff', 'lightgoldenrodyellow': '#fafad2', 'lightgray': '#d3d3d3',
    'lightgreen': '#90ee90', 'lightgrey': '#d3d3d3', 'lightpink': '#ffb6c1',
    'lightsalmon': '#ffa07a', 'lightseagreen': '#20b2aa', 'lightskyblue': '#87cefa',
    'lightslategray': '#778899', 'lightslategrey': '#778899', 'lightsteelblue': '#b0c4de',
    'lightyellow': '#ffffe0', 'lime': '#00ff00', 'limegreen': '#32cd32',
    'linen': '#faf0e6', 'magenta': '#ff00ff', 'maroon': '#800000',
    'mediumaquamarine': '#66cdaa', 'mediumblue': '#0000cd', 'mediumorchid': '#ba55d3',
    'mediumpurple': '#9370db', 'mediumseagreen': '#3cb371', 'mediumslateblue': '#7b68ee',
    'mediumspringgreen': '#00fa9a', 'mediumturquoise': '#48d1cc', 'mediumvioletred': '#c71585',
    'midnightblue': '#191970', 'mintcream': '#f5fffa', 'mistyrose': '#ffe4e1',
    'moccasin': '#ffe4b5', 'navajowhite': '#ffdead', 'navy': '#000080',
    'oldlace': '#fdf5e6', 'olive': '#808000', 'olivedrab': '#6b8e23',
    'orange': '#ffa500', 'orangered': '#ff4500', 'orchid': '#da70d6',
    'palegoldenrod': '#eee8aa', 'palegreen': '#98fb98', 'paleturquoise': '#afeeee',
    'palevioletred': '#db7093', 'papayawhip': '#ffefd5', 'peachpuff': '#ffdab9',
    'peru': '#cd853f', 'pink': '#ffc0cb', 'plum': '#dda0dd',
    'powderblue': '#b0e0e6', 'purple': '#800080', 'rebeccapurple': '#663399',
    'red': '#ff0000', 'rosybrown': '#bc8f8f', 'royalblue': '#4169e1',
    'saddlebrown': '#8b4513', 'salmon': '#fa8072', 'sandybrown': '#f4a460',
    'seagreen': '#2e8b57', 'seashell': '#fff5ee', 'sienna': '#a0522d',
    'silver': '#c0c0c0', 'skyblue': '#87ceeb', 'slateblue': '#6a5acd',
    'slategray': '#708090', 'slategrey': '#708090', 'snow': '#fffafa',
    'springgreen': '#00ff7f', 'steelblue': '#4682b4', 'tan': '#d2b48c',
    'teal': '#008080', 'thistle': '#d8bfd8', 'tomato': '#ff6347',
    'turquoise': '#40e0d0', 'violet': '#ee82ee', 'wheat': '#f5deb3',
    'white': '#ffffff', 'whitesmoke': '#f5f5f5', 'yellow': '#ffff00',
    'yellowgreen': '#9acd32',
}

# Keywords that never resolve to a concrete color on their own
UNRESOLVED_KEYWORDS = {
    'transparent', 'inherit', 'initial', 'unset', 'revert',
    'revert-layer', 'currentcolor', 'none', '',
}

HEX_PATTERN = re.compile(r'^#([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$')
FUNCTION_PATTERN = re.compile(r'^(rgba?|hsla?)\(\s*([^()]*)\)$')
NUMBER_PATTERN = re.compile(r'^[+-]?(\d+\.?\d*|\.\d+)(e[+-]?\d+)?(%|deg|turn|rad|grad)?$')

# sRGB gamma-correction threshold on the normalized channel value
GAMMA_THRESHOLD = 0.03928


def _split_arguments(body: str) -> Optional[Tuple[list, Optional[str]]]:
    """Split functional-notation arguments into channel tokens and alpha."""
    body = body.strip()
    if ',' in body:
        parts = [p.strip() for p in body.split(',')]
        if len(parts) == 4:
            return parts[:3], parts[3]
        if len(parts) == 3:
            return parts, None
        return None
    alpha = None
    if '/' in body:
        body, alpha = body.split('/', 1)
        alpha = alpha.strip()
    parts = body.split()
    if len(parts) != 3:
        return None
    return parts, alpha


def _number(token: str) -> Optional[Tuple[float, Optional[str]]]:
    match = NUMBER_PATTERN.match(token)
    if not match:
        return None
    unit = match.group(3)
    value = float(token[:-len(unit)] if unit else token)
    if not math.isfinite(value):
        return None
    return value, unit


def _clamp_channel(value: float) -> int:
    return max(0, min(255, int(round(value))))


def _parse_alpha(token: Optional[str]) -> Optional[float]:
    if token is None:
        return 1.0
    parsed = _number(token)
    if parsed is None:
        return None
    value, unit = parsed
    if unit == '%':
        value = value / 100
    elif unit is not None:
        return None
    return max(0.0, min(1.0, value))


def _hsl_to_rgb(h: float, s: float, l: float) -> Tuple[int, int, int]:
    """Convert HSL (degrees, percent, percent) to RGB."""
    h = (h % 360) / 360
    s = max(0.0, min(100.0, s)) / 100
    l = max(0.0, min(100.0, l)) / 100

    if s == 0:
        r = g = b = l
    else:
        def hue_to_rgb(p, q, t):
            if t < 0:
                t += 1
            if t > 1:
                t -= 1
            if t < 1/6:
                return p + (q - p) * 6 * t
            if t < 1/2:
                return q
            if t < 2/3:
                return p + (q - p) * (2/3 - t) * 6
            return p

        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = hue_to_rgb(p, q, h + 1/3)
        g = hue_to_rgb(p, q, h)
        b = hue_to_rgb(p, q, h - 1/3)

    return (_clamp_channel(r * 255), _clamp_channel(g * 255), _clamp_channel(b * 255))


def _parse_hex(hex_val: str) -> Tuple[Tuple[int, int, int], float]:
    if len(hex_val) in (3, 4):
        hex_val = ''.join(c * 2 for c in hex_val)
    rgb = tuple(int(hex_val[i:i+2], 16) for i in (0, 2, 4))
    alpha = int(hex_val[6:8], 16) / 255 if len(hex_val) == 8 else 1.0
    return rgb, alpha


def _parse_function(name: str, body: str) -> Optional[Tuple[Tuple[int, int, int], float]]:
    split = _split_arguments(body)
    if split is None:
        return None
    tokens, alpha_token = split
    alpha = _parse_alpha(alpha_token)
    if alpha is None:
        return None

    parsed = [_number(token) for token in tokens]
    if any(p is None for p in parsed):
        return None

    if name.startswith('rgb'):
        channels = []
        for value, unit in parsed:
            if unit == '%':
                value = value * 255 / 100
            elif unit is not None:
                return None
            channels.append(_clamp_channel(value))
        return tuple(channels), alpha

    (h, h_unit), (s, s_unit), (l, l_unit) = parsed
    if h_unit == 'turn':
        h = h * 360
    elif h_unit == 'rad':
        h = h * 180 / 3.141592653589793
    elif h_unit == 'grad':
        h = h * 0.9
    elif h_unit not in (None, 'deg'):
        return None
    if s_unit not in ('%', None) or l_unit not in ('%', None):
        return None
    return _hsl_to_rgb(h, s, l), alpha


def parse_color(color_text: Optional[str]) -> Optional[Tuple[ColorSample, float]]:
    """
    Parse CSS color text into an RGB sample and its alpha.

    Args:
        color_text: Color as written in CSS or reported by getComputedStyle

    Returns:
        Tuple of (ColorSample, alpha in [0, 1]) or None when the text does
        not denote a concrete color
    """
    if color_text is None:
        return None
    value = color_text.strip().lower()
    if value in UNRESOLVED_KEYWORDS:
        return None

    if value in NAMED_COLORS:
        value = NAMED_COLORS[value]

    result = None
    hex_match = HEX_PATTERN.match(value)
    if hex_match:
        result = _parse_hex(hex_match.group(1))
    else:
        func_match = FUNCTION_PATTERN.match(value)
        if func_match:
            result = _parse_function(func_match.group(1), func_match.group(2))

    if result is None:
        return None
    rgb, alpha = result
    return ColorSample(*rgb), alpha


def to_rgb(color_text: Optional[str]) -> Optional[ColorSample]:
    """
    Resolve CSS color text to an opaque RGB sample.

    Transparent and translucent colors have no RGB value of their own until
    they are composited over a backdrop, so they resolve to None, as do
    keywords and malformed text.

    Args:
        color_text: Color text

    Returns:
        ColorSample or None
    """
    parsed = parse_color(color_text)
    if parsed is None:
        return None
    sample, alpha = parsed
    if alpha < 1.0:
        return None
    return sample


def composite(color_text: Optional[str], backdrop: ColorSample) -> Optional[ColorSample]:
    """
    Blend a possibly translucent color over an opaque backdrop.

    Args:
        color_text: Foreground color text
        backdrop: Opaque color underneath

    Returns:
        The blended sample, or None if the color is unparseable or fully
        transparent
    """
    parsed = parse_color(color_text)
    if parsed is None:
        return None
    sample, alpha = parsed
    if alpha <= 0.0:
        return None
    if alpha >= 1.0:
        return sample
    return ColorSample(*(
        _clamp_channel(alpha * front + (1 - alpha) * back)
        for front, back in zip(sample.as_tuple(), backdrop.as_tuple())
    ))


def effective_background(layers: Sequence[BackgroundLayer]) -> Optional[ColorSample]:
    """
    Resolve the background an element's text is actually drawn on.

    Walks from the element outward until the first opaque background, then
    blends the translucent layers in front of it back to front. A background
    image in front of the first opaque layer, or a chain without any opaque
    layer, leaves the background unresolved.

    Args:
        layers: Element background first, then each ancestor's

    Returns:
        ColorSample or None
    """
    translucent = []
    base = None
    for layer in layers:
        if layer.has_image:
            return None
        parsed = parse_color(layer.color)
        if parsed is None:
            # transparent layer, the ancestor shows through
            continue
        sample, alpha = parsed
        if alpha >= 1.0:
            base = sample
            break
        if alpha > 0.0:
            translucent.append(layer.color)

    if base is None:
        return None
    for color_text in reversed(translucent):
        base = composite(color_text, base)
    return base


def luminance(sample: ColorSample) -> float:
    """
    WCAG relative luminance of an RGB sample.

    Args:
        sample: Opaque color

    Returns:
        Luminance in [0, 1]
    """
    linear = []
    for channel in sample.as_tuple():
        c = channel / 255
        linear.append(c / 12.92 if c <= GAMMA_THRESHOLD else ((c + 0.055) / 1.055) ** 2.4)
    return 0.2126 * linear[0] + 0.7152 * linear[1] + 0.0722 * linear[2]


def contrast_ratio(a: ColorSample, b: ColorSample) -> float:
    """
    WCAG contrast ratio between two colors.

    Args:
        a: First color
        b: Second color

    Returns:
        Contrast ratio (1.0 to 21.0), symmetric in its arguments
    """
    l1 = luminance(a)
    l2 = luminance(b)

    lighter = max(l1, l2)
    darker = min(l1, l2)

    return (lighter + 0.05) / (darker + 0.05)
