"""Tests for integer serialization of colours."""

import json

import pytest
from pydantic import BaseModel, Field, ValidationError

from rgbcolour import Colour, ColourDecodeError, ColourError
from rgbcolour.colour import UINT32_MAX
from rgbcolour.serialization import (
    ColourJSONEncoder,
    PydanticColour,
    from_json,
    to_json,
)


class Theme(BaseModel):
    accent: PydanticColour
    background: PydanticColour = Field(default_factory=Colour.default)


class TestJSON:

    def test_to_json_is_integer(self):
        assert to_json(Colour(0xFFFFFF)) == "16777215"
        assert to_json(Colour(0)) == "0"

    @pytest.mark.parametrize("value", [0, 1, 0xFFFFFF, 0x1000000, UINT32_MAX])
    def test_roundtrip(self, value):
        assert from_json(to_json(Colour(value))) == Colour(value)

    def test_from_bytes(self):
        assert from_json(b"255") == Colour(0xFF)

    @pytest.mark.parametrize(
        "payload",
        ["true", "1.5", '"#ffffff"', "[52, 152, 219]", '{"value": 1}', "null"],
    )
    def test_rejects_non_integer(self, payload):
        with pytest.raises(ColourDecodeError) as excinfo:
            from_json(payload)
        assert excinfo.value.data == payload

    @pytest.mark.parametrize("payload", ["-1", str(UINT32_MAX + 1)])
    def test_rejects_out_of_range(self, payload):
        with pytest.raises(ColourDecodeError, match="outside"):
            from_json(payload)

    def test_rejects_malformed(self):
        with pytest.raises(ColourDecodeError) as excinfo:
            from_json("{")
        assert isinstance(excinfo.value.__cause__, json.JSONDecodeError)

    def test_rejects_undecodable_bytes(self):
        payload = b"\xff\xfe\xfd"
        with pytest.raises(ColourDecodeError) as excinfo:
            from_json(payload)
        assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
        assert excinfo.value.data == payload

    def test_decode_error_is_colour_error(self):
        with pytest.raises(ColourError):
            from_json("oops")

    def test_encoder(self):
        document = {"accent": Colour.RED, "other": [Colour(1), 2]}
        encoded = json.dumps(document, cls=ColourJSONEncoder)
        assert json.loads(encoded) == {"accent": 0xED4245, "other": [1, 2]}

    def test_encoder_still_rejects_unknown(self):
        with pytest.raises(TypeError):
            json.dumps({"x": object()}, cls=ColourJSONEncoder)


class TestPydantic:

    def test_accepts_colour(self):
        theme = Theme(accent=Colour.BLUE)
        assert theme.accent == Colour.BLUE
        assert theme.background == Colour.BLACK

    def test_accepts_int(self):
        theme = Theme(accent=0x3498DB)
        assert isinstance(theme.accent, Colour)
        assert theme.accent == Colour.BLUE

    def test_dump_as_int(self):
        theme = Theme(accent=Colour.BLUE)
        assert theme.model_dump() == {"accent": 0x3498DB, "background": 0}

    def test_dump_json_as_int(self):
        theme = Theme(accent=Colour.BLUE, background=Colour(UINT32_MAX))
        assert json.loads(theme.model_dump_json()) == {
            "accent": 0x3498DB,
            "background": UINT32_MAX,
        }

    def test_validate_json(self):
        theme = Theme.model_validate_json('{"accent": 255}')
        assert theme.accent == Colour(0xFF)

    def test_json_roundtrip(self):
        theme = Theme(accent=Colour(0xAB123456))
        assert Theme.model_validate_json(theme.model_dump_json()) == theme

    @pytest.mark.parametrize("value", [-1, UINT32_MAX + 1])
    def test_rejects_out_of_range(self, value):
        with pytest.raises(ValidationError):
            Theme(accent=value)

    @pytest.mark.parametrize("value", [True, "255", 255.0])
    def test_rejects_non_integer(self, value):
        with pytest.raises(ValidationError):
            Theme(accent=value)

    @pytest.mark.parametrize("payload", ['"255"', "255.0", "true"])
    def test_rejects_non_integer_json(self, payload):
        with pytest.raises(ValidationError):
            Theme.model_validate_json(f'{{"accent": {payload}}}')

    def test_rejects_object_payload(self):
        with pytest.raises(ValidationError):
            Theme.model_validate_json('{"accent": {"value": 1}}')

    def test_json_schema(self):
        schema = Theme.model_json_schema()["properties"]["accent"]
        assert schema["type"] == "integer"
        assert schema["minimum"] == 0
        assert schema["maximum"] == UINT32_MAX
