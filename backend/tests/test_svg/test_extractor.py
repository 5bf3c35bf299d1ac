"""Tests for viewBox/path extraction."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from svgmask.errors import (
    ErrorKind,
    ExtractionError,
    InvalidDimensions,
    InvalidPathStart,
    MalformedViewBox,
    MissingPath,
    MissingViewBox,
)
from svgmask.svg.extractor import extract, parse_viewbox
from tests.conftest import CIRCLE_SVG, HOME_SVG, NO_VIEWBOX_SVG, SIMPLE_SVG, STAR_SVG


def test_extract_simple():
    icon = extract(SIMPLE_SVG)
    assert icon.original_path == "M 100 50 L 200 100"
    assert icon.converted_path == "M 0.5000 0.5000 L 1.0000 1.0000"
    assert icon.width == 200
    assert icon.height == 100


def test_extract_takes_first_path():
    icon = extract(HOME_SVG)
    assert icon.original_path == "M15 21v-8a1 1 0 0 0-1-1h-4a1 1 0 0 0-1 1v8"
    assert icon.converted_path == (
        "M 0.6250 0.8750 v -0.3333 a 1 1 0 0 0 -1 -1 h -0.1667 a 1 1 0 0 0 -1 1 v 0.3333"
    )


def test_extract_full_mode_scales_arcs():
    icon = extract(HOME_SVG, mode="full")
    assert icon.converted_path == (
        "M 0.6250 0.8750 v -0.3333 a 0.0417 0.0417 0 0 0 -0.0417 -0.0417"
        " h -0.1667 a 0.0417 0.0417 0 0 0 -0.0417 0.0417 v 0.3333"
    )


def test_extract_single_quotes_and_commas():
    icon = extract(STAR_SVG)
    assert icon.width == 100
    assert icon.height == 50
    assert icon.converted_path == (
        "M 0.5000 0.0000 L 0.6100 0.3600 L 1.0000 0.3800 L 0.6800 0.6400 L 0.7900 1.0000"
        " L 0.5000 0.8000 L 0.2100 1.0000 L 0.3200 0.6400 L 0.0000 0.3800 L 0.3900 0.3600 Z"
    )


def test_d_attribute_after_other_attributes():
    icon = extract('<svg viewBox="0 0 10 10"><path id="p" class="d" d="M 5 5"/></svg>')
    assert icon.original_path == "M 5 5"


def test_id_attribute_is_not_d():
    with pytest.raises(MissingPath):
        extract('<svg viewBox="0 0 10 10"><path id="M 5 5"/></svg>')


def test_parsed_icon_is_frozen():
    icon = extract(SIMPLE_SVG)
    with pytest.raises(ValidationError):
        icon.converted_path = "M 0 0"


def test_extract_is_idempotent():
    assert extract(STAR_SVG) == extract(STAR_SVG)


class TestExtractionErrors:
    def test_missing_viewbox(self):
        with pytest.raises(MissingViewBox) as exc_info:
            extract(NO_VIEWBOX_SVG)
        assert exc_info.value.kind is ErrorKind.MISSING_VIEWBOX

    def test_missing_path(self):
        with pytest.raises(MissingPath) as exc_info:
            extract(CIRCLE_SVG)
        assert exc_info.value.kind is ErrorKind.MISSING_PATH

    def test_short_viewbox(self):
        with pytest.raises(MalformedViewBox):
            extract('<svg viewBox="0 0 24"><path d="M 1 1"/></svg>')

    def test_non_numeric_viewbox(self):
        with pytest.raises(MalformedViewBox) as exc_info:
            extract('<svg viewBox="0 0 wide 24"><path d="M 1 1"/></svg>')
        assert exc_info.value.detail == "wide"

    def test_zero_width_wraps_normalizer_failure(self):
        with pytest.raises(ExtractionError) as exc_info:
            extract('<svg viewBox="0 0 0 24"><path d="M 1 1"/></svg>')
        err = exc_info.value
        assert err.kind is ErrorKind.INVALID_DIMENSIONS
        assert isinstance(err.__cause__, InvalidDimensions)

    @pytest.mark.parametrize("viewbox", ["0 0 24 0", "0 0 -24 24", "0 0 inf 24"])
    def test_viewbox_dimensions_must_be_positive(self, viewbox):
        with pytest.raises(ExtractionError) as exc_info:
            extract(f'<svg viewBox="{viewbox}"><path d="M 12"/></svg>')
        assert exc_info.value.kind is ErrorKind.INVALID_DIMENSIONS
        assert isinstance(exc_info.value.__cause__, InvalidDimensions)

    def test_bad_path_start_wraps_normalizer_failure(self):
        with pytest.raises(ExtractionError) as exc_info:
            extract('<svg viewBox="0 0 24 24"><path d="L 1 1"/></svg>')
        assert exc_info.value.kind is ErrorKind.INVALID_PATH_START
        assert isinstance(exc_info.value.__cause__, InvalidPathStart)


class TestParseViewBox:
    def test_whitespace(self):
        vb = parse_viewbox(" -2  -4\t48 24 ")
        assert (vb.min_x, vb.min_y, vb.width, vb.height) == (-2, -4, 48, 24)

    def test_commas(self):
        vb = parse_viewbox("0,0,24,24")
        assert (vb.width, vb.height) == (24, 24)

    def test_extra_tokens_ignored(self):
        assert parse_viewbox("0 0 10 20 99").height == 20

    def test_nan_rejected(self):
        with pytest.raises(MalformedViewBox):
            parse_viewbox("0 0 nan 24")
