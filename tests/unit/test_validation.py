"""Unit tests for input validation."""

import pytest
from PIL import Image

from creative_suite.core.errors import MissingInputError
from creative_suite.ui.validation import is_blank, load_input_image, require_fields


class TestIsBlank:
    @pytest.mark.parametrize("value", [None, "", "   ", "\n\t", [], (), b""])
    def test_blank(self, value):
        assert is_blank(value)

    @pytest.mark.parametrize("value", ["a", " x ", 0, 3, [1], "/tmp/image.png"])
    def test_not_blank(self, value):
        assert not is_blank(value)


class TestRequireFields:
    def test_all_present(self):
        require_fields({"a": "x", "b": "y"}, ("a", "b"), "missing")

    def test_missing_key(self):
        with pytest.raises(MissingInputError, match="Please upload"):
            require_fields({"a": "x"}, ("a", "b"), "Please upload an image.")

    def test_whitespace_only(self):
        with pytest.raises(MissingInputError):
            require_fields({"caption": "   "}, ("caption",), "Please provide a caption.")

    def test_optional_fields_are_ignored(self):
        require_fields({"text": "x", "style": ""}, ("text",), "missing")


class TestLoadInputImage:
    def test_png(self, png_file, png_bytes):
        image = load_input_image(png_file)

        assert image.data == png_bytes
        assert image.mime_type == "image/png"

    def test_mime_type_comes_from_content(self, temp_dir):
        path = temp_dir / "photo.png"
        Image.new("RGB", (8, 8), "green").save(path, format="JPEG")

        assert load_input_image(str(path)).mime_type == "image/jpeg"

    def test_multi_picture_jpeg_is_sent_as_jpeg(self, temp_dir):
        """Camera photos with an MPF second frame open as MPO in Pillow."""
        path = temp_dir / "phone.jpg"
        first = Image.new("RGB", (16, 16), "red")
        first.save(path, format="MPO", save_all=True, append_images=[Image.new("RGB", (16, 16), "blue")])
        with Image.open(path) as opened:
            assert opened.format == "MPO"

        assert load_input_image(path).mime_type == "image/jpeg"

    def test_missing_file(self, temp_dir):
        with pytest.raises(MissingInputError, match="not found"):
            load_input_image(temp_dir / "nope.png")

    def test_not_an_image(self, temp_dir):
        path = temp_dir / "notes.png"
        path.write_text("definitely not pixels")

        with pytest.raises(MissingInputError, match="not a supported image"):
            load_input_image(path)
