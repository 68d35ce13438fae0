"""
Fraction Arithmetic
Reads ASCII fractions, unicode fraction glyphs, mixed numbers and plain
decimals from the start of ingredient text. No rounding happens here.
"""

import re
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

UNICODE_FRACTIONS: Mapping[str, float] = MappingProxyType({
    '½': 1 / 2,
    '⅓': 1 / 3,
    '⅔': 2 / 3,
    '¼': 1 / 4,
    '¾': 3 / 4,
    '⅕': 1 / 5,
    '⅖': 2 / 5,
    '⅗': 3 / 5,
    '⅘': 4 / 5,
    '⅙': 1 / 6,
    '⅚': 5 / 6,
    '⅛': 1 / 8,
    '⅜': 3 / 8,
    '⅝': 5 / 8,
    '⅞': 7 / 8,
})

ASCII_FRACTION_PATTERN = re.compile(r'(\d+)/(\d+)')
GLUED_MIXED_PATTERN = re.compile(r'(\d+\.?\d*)([' + ''.join(UNICODE_FRACTIONS) + r'])')
SPACED_MIXED_PATTERN = re.compile(r'(\d+\.?\d*)\s+(\d+)/(\d+)')
DECIMAL_PATTERN = re.compile(r'\d+\.?\d*')


def _divide(numerator: str, denominator: str) -> Optional[float]:
    denominator_value = int(denominator)
    if denominator_value == 0:
        return None
    return int(numerator) / denominator_value


def parse_fraction(text: str) -> Optional[float]:
    """
    Parse a complete ASCII fraction such as '1/4'.

    Returns:
        The fraction's value, or None if the text is not a fraction or
        the denominator is zero
    """
    match = ASCII_FRACTION_PATTERN.fullmatch(text.strip())
    if not match:
        return None
    return _divide(match.group(1), match.group(2))


def parse_fraction_prefix(text: str) -> Optional[Tuple[float, int]]:
    """
    Read a fraction or mixed number from the start of text.

    Recognises a single unicode glyph ('¾'), a number glued to a glyph
    ('1½'), a space-separated mixed number ('1 1/2') and a bare ASCII
    fraction ('1/4').

    Args:
        text: Text beginning with the candidate fraction

    Returns:
        (value, consumed_length), or None when no fraction is found
    """
    if not text:
        return None

    if text[0] in UNICODE_FRACTIONS:
        return UNICODE_FRACTIONS[text[0]], 1

    glued = GLUED_MIXED_PATTERN.match(text)
    if glued:
        return float(glued.group(1)) + UNICODE_FRACTIONS[glued.group(2)], glued.end()

    spaced = SPACED_MIXED_PATTERN.match(text)
    if spaced:
        fraction = _divide(spaced.group(2), spaced.group(3))
        if fraction is not None:
            return float(spaced.group(1)) + fraction, spaced.end()

    simple = ASCII_FRACTION_PATTERN.match(text)
    if simple:
        value = _divide(simple.group(1), simple.group(2))
        if value is not None:
            return value, simple.end()

    return None


def parse_quantity(text: str) -> Tuple[Optional[float], str]:
    """
    Split a leading quantity off an ingredient line.

    A fraction or mixed number (see parse_fraction_prefix) wins over a
    plain decimal. A units run glued to the number ('600g') is left in
    the remainder.

    Args:
        text: One ingredient line

    Returns:
        (quantity, remainder). quantity is None when the line has no
        numeric prefix; the remainder is then the whole trimmed line.
    """
    remaining = text.strip()

    fraction = parse_fraction_prefix(remaining)
    if fraction is not None:
        value, consumed = fraction
        return value, remaining[consumed:].strip()

    decimal_match = DECIMAL_PATTERN.match(remaining)
    if not decimal_match:
        return None, remaining

    return float(decimal_match.group(0)), remaining[decimal_match.end():].strip()
