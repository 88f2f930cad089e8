"""Unit tests for the response-part union."""

from types import SimpleNamespace

import pytest
from google.genai import types

from creative_suite.core.errors import GenerationFailedError, NoImageProducedError
from creative_suite.core.response_parts import (
    ImagePart,
    OtherPart,
    TextPart,
    classify_part,
    find_first_image,
    parts_from_response,
)


class TestClassifyPart:
    def test_image(self, png_bytes, genai_responses):
        part = classify_part(genai_responses.image_part(png_bytes, "image/jpeg"))
        assert part == ImagePart(data=png_bytes, mime_type="image/jpeg")

    def test_text(self, genai_responses):
        assert classify_part(genai_responses.text_part("hello")) == TextPart(text="hello")

    def test_other(self):
        part = classify_part(types.Part())
        assert isinstance(part, OtherPart)

    def test_non_image_inline_data_is_other(self):
        part = classify_part(types.Part(inline_data=types.Blob(data=b"%PDF", mime_type="application/pdf")))
        assert isinstance(part, OtherPart)

    def test_missing_mime_type_defaults_to_png(self, png_bytes):
        part = classify_part(SimpleNamespace(inline_data=SimpleNamespace(data=png_bytes, mime_type=None)))
        assert part == ImagePart(data=png_bytes, mime_type="image/png")


class TestPartsFromResponse:
    def test_flattens_first_candidate(self, png_bytes, genai_responses):
        r = genai_responses
        response = r.content(r.text_part("hi"), r.image_part(png_bytes))
        parts = parts_from_response(response)

        assert [type(p) for p in parts] == [TextPart, ImagePart]

    def test_no_candidates_is_failure(self):
        with pytest.raises(GenerationFailedError):
            parts_from_response(types.GenerateContentResponse(candidates=[]))

    def test_candidate_without_content_is_failure(self):
        response = types.GenerateContentResponse(candidates=[types.Candidate()])
        with pytest.raises(GenerationFailedError, match="without content"):
            parts_from_response(response)


class TestFindFirstImage:
    def test_first_image_wins(self, genai_responses):
        first, second = genai_responses.png("red"), genai_responses.png("blue")
        parts = [TextPart("a"), ImagePart(first, "image/png"), ImagePart(second, "image/png")]

        assert find_first_image(parts).image_bytes == first

    def test_no_image_raises(self):
        with pytest.raises(NoImageProducedError):
            find_first_image([TextPart("only words"), OtherPart()])

    def test_empty_raises(self):
        with pytest.raises(NoImageProducedError):
            find_first_image([])
