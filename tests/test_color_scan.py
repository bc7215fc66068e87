# tests/test_color_scan.py
"""Pattern scanner: boundaries, digit limits, group arity and scan order."""

from __future__ import annotations

import pytest

from color_code_extractor.extraction.color.scan import COLOR_PATTERNS, scan_text
from color_code_extractor.extraction.color.types import FormatTag


def _by_tag(text: str, tag: FormatTag):
    return [c for c in scan_text(text) if c.tag is tag]


# ──────────────────────────────────────────────────────────────────────────────
# Pattern set
# ──────────────────────────────────────────────────────────────────────────────
def test_patterns_are_in_fixed_scan_order():
    assert [p.tag for p in COLOR_PATTERNS] == [
        FormatTag.HEX,
        FormatTag.RGB,
        FormatTag.RGBA,
        FormatTag.HSL,
        FormatTag.HSLA,
        FormatTag.BARE_RGB,
        FormatTag.BARE_HSL,
    ]
    assert [p.arity for p in COLOR_PATTERNS] == [1, 3, 4, 3, 4, 3, 3]


def test_scan_output_is_pattern_major():
    cands = scan_text("1, 2, 3 then #abc")
    assert [c.tag for c in cands] == [FormatTag.HEX, FormatTag.BARE_RGB]


def test_empty_text_has_no_candidates():
    assert scan_text("") == []


# ──────────────────────────────────────────────────────────────────────────────
# Hex
# ──────────────────────────────────────────────────────────────────────────────
def test_hex_offsets_raw_and_group():
    (c,) = _by_tag("color: #FFF;", FormatTag.HEX)
    assert (c.start, c.end, c.raw, c.groups) == (7, 11, "#FFF", ("FFF",))


@pytest.mark.parametrize("text,digits", [("#a1b2c3", "a1b2c3"), ("0xABC", "ABC"), ("x #123456 y", "123456")])
def test_hex_accepts_three_or_six_digits(text, digits):
    (c,) = _by_tag(text, FormatTag.HEX)
    assert c.groups == (digits,)


@pytest.mark.parametrize("text", ["#FFFF", "#FFFFF", "#FFFFFFF", "#FFFg", "0XABC", "#GGG"])
def test_hex_requires_word_boundary_and_exact_length(text):
    assert _by_tag(text, FormatTag.HEX) == []


# ──────────────────────────────────────────────────────────────────────────────
# Functional notations
# ──────────────────────────────────────────────────────────────────────────────
def test_rgb_is_case_insensitive_and_space_tolerant():
    (c,) = _by_tag("RGB ( 10 ,20,  30 )", FormatTag.RGB)
    assert c.groups == ("10", "20", "30")
    assert c.channels == (10, 20, 30)


def test_rgba_captures_alpha_but_not_rgb():
    text = "rgba(10, 20, 30, 0.5)"
    assert _by_tag(text, FormatTag.RGB) == []
    (c,) = _by_tag(text, FormatTag.RGBA)
    assert c.groups == ("10", "20", "30", "0.5")
    assert c.alpha == 0.5


def test_rgba_malformed_alpha_is_captured_as_none():
    (c,) = _by_tag("rgba(1, 2, 3, 1.2.3)", FormatTag.RGBA)
    assert c.groups[3] == "1.2.3"
    assert c.alpha is None


def test_hsl_requires_percent_signs():
    assert _by_tag("hsl(120, 50, 25)", FormatTag.HSL) == []
    (c,) = _by_tag("hsl(120, 50%, 25%)", FormatTag.HSL)
    assert c.channels == (120, 50, 25)
    assert c.alpha is None


def test_hsla_four_groups():
    (c,) = _by_tag("HSLA(10,20%,30%,1)", FormatTag.HSLA)
    assert c.groups == ("10", "20", "30", "1")
    assert c.alpha == 1.0


def test_hex_match_has_no_channels():
    (c,) = _by_tag("#abc", FormatTag.HEX)
    with pytest.raises(ValueError):
        _ = c.channels


# ──────────────────────────────────────────────────────────────────────────────
# Bare triplets
# ──────────────────────────────────────────────────────────────────────────────
def test_bare_rgb_matches_prose_numbers():
    (c,) = _by_tag("sides 3, 4, 5 of a triangle", FormatTag.BARE_RGB)
    assert (c.raw, c.channels) == ("3, 4, 5", (3, 4, 5))


def test_bare_rgb_inside_function_syntax_is_also_found():
    (c,) = _by_tag("rgb(1, 2, 3)", FormatTag.BARE_RGB)
    assert (c.start, c.end) == (4, 11)


@pytest.mark.parametrize("text", ["1000, 20, 30", "10, 20, 3000", "10, 2000, 30"])
def test_bare_rgb_never_splits_four_digit_numbers(text):
    assert _by_tag(text, FormatTag.BARE_RGB) == []


def test_bare_rgb_is_non_overlapping_within_pattern():
    cands = _by_tag("1, 2, 3, 4, 5, 6", FormatTag.BARE_RGB)
    assert [c.raw for c in cands] == ["1, 2, 3", "4, 5, 6"]


def test_bare_hsl_needs_word_char_after_last_percent():
    # `%\b` only holds when a word character follows the final percent sign.
    assert _by_tag("hsl 120, 50%, 25% here", FormatTag.BARE_HSL) == []
    (c,) = _by_tag("0, 100%, 50%x", FormatTag.BARE_HSL)
    assert c.channels == (0, 100, 50)


def test_non_ascii_digits_are_not_captured():
    # Arabic-Indic digits are \d in Unicode mode; scanning is ASCII-only.
    assert scan_text("١, ٢, ٣") == []
