"""
Tests for the invocation-scoped font cache.
"""

from unittest.mock import MagicMock, patch

import pytest

from IC_Libs.ImageEditingLib.draw_ops import TextParams
from IC_Libs.ImageEditingLib.font_cache import FontCache, FontHandle
from IC_Libs.pillow_compat import ImageFont


def _fake_font(size):
    font = MagicMock()
    font.size = size
    font.font_variant.side_effect = lambda size: _fake_font(size)
    return font


class TestFontCache:
    """Tests for FontCache."""

    def test_font_file_loaded_once_per_path(self):
        cache = FontCache()

        with patch.object(ImageFont, "truetype", side_effect=lambda path, size: _fake_font(size)) as truetype:
            first = cache.load_file("fonts/a.ttf", 18)
            second = cache.load_file("fonts/a.ttf", 30)

        assert truetype.call_count == 1
        assert first is second
        assert "fonts/a.ttf" in cache
        assert len(cache) == 1

    def test_other_sizes_derive_from_loaded_handle(self):
        cache = FontCache()

        with patch.object(ImageFont, "truetype", side_effect=lambda path, size: _fake_font(size)) as truetype:
            same = cache.file_font("a.ttf", 18)
            bigger = cache.file_font("a.ttf", 40)

        assert truetype.call_count == 1
        assert same.size == 18
        assert bigger.size == 40

    def test_separate_caches_do_not_share_fonts(self):
        with patch.object(ImageFont, "truetype", side_effect=lambda path, size: _fake_font(size)) as truetype:
            FontCache().load_file("a.ttf", 18)
            FontCache().load_file("a.ttf", 18)

        assert truetype.call_count == 2

    def test_unreadable_font_file_raises(self, tmp_path):
        cache = FontCache()

        with pytest.raises(OSError):
            cache.load_file(str(tmp_path / "missing.ttf"), 18)

        assert len(cache) == 0

    def test_unknown_system_family_falls_back_to_default(self):
        font = FontCache().system_font("definitely-not-installed", 22)

        assert font is not None

    def test_system_family_tries_file_extensions(self):
        attempts = []

        def fake_truetype(name, size):
            attempts.append(name)
            if name == "calibri.ttf":
                return _fake_font(size)
            raise OSError("cannot open resource")

        with patch.object(ImageFont, "truetype", side_effect=fake_truetype):
            font = FontCache().system_font("Calibri", 12)

        assert font.size == 12
        assert attempts[0] == "Calibri"
        assert "calibri.ttf" in attempts


class TestTextParamsFontSelection:
    """Tests for choosing between font files and system families."""

    def test_font_file_takes_precedence(self):
        fonts = MagicMock(spec=FontCache)
        params = TextParams.from_params(
            {"text": "x", "fontFile": "my.ttf", "font": "Arial", "fontSize": "12"},
            (10, 10),
        )

        params.load_font(fonts)

        fonts.file_font.assert_called_once_with("my.ttf", 12.0)
        fonts.system_font.assert_not_called()

    def test_system_family_used_without_font_file(self):
        fonts = MagicMock(spec=FontCache)
        params = TextParams.from_params({"text": "x", "font": "Arial"}, (10, 10))

        params.load_font(fonts)

        fonts.system_font.assert_called_once_with("Arial", 18.0)


def test_font_handle_reuses_face_at_same_size():
    font = _fake_font(18)
    handle = FontHandle(path="a.ttf", font=font)

    assert handle.at_size(18) is font
    font.font_variant.assert_not_called()
