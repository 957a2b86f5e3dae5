"""Pytest configuration and fixtures."""

import pytest
import tempfile
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def sample_object_text():
    """Small object document with nested containers."""
    return '{"a": 1, "b": [2, 3]}'


@pytest.fixture
def sample_font_text():
    """Typeface-style document like the ones the tool is used to trim."""
    return '''
    {
        "glyphs": {
            "A": {"ha": 903, "x_min": 0, "x_max": 903, "o": "m 0 0 l 354 1013 l 903 0 z"},
            "B": {"ha": 847, "x_min": 97, "x_max": 786, "o": "m 97 0 l 97 1013 z"},
            "\\u00e9": {"ha": 764, "x_min": 60, "x_max": 704, "o": ""}
        },
        "familyName": "Helvetiker",
        "ascender": 1288,
        "descender": -347.5,
        "underlinePosition": -104,
        "underlineThickness": 69,
        "boundingBox": {"yMin": -349, "xMin": -6, "yMax": 1390, "xMax": 1426},
        "resolution": 1000,
        "original_font_information": {"format": 0, "copyright": "Copyright (c) 1990 \\"URW\\""},
        "cssFontWeight": "normal",
        "cssFontStyle": "normal",
        "kerning": [],
        "hinted": false,
        "license": null
    }
    '''


@pytest.fixture
def write_json_file(temp_dir):
    """Write text to a file in the temporary directory and return its path."""
    def _write(text, name="input.json", encoding="utf-8"):
        path = temp_dir / name
        path.write_bytes(text.encode(encoding) if isinstance(text, str) else text)
        return path
    return _write
