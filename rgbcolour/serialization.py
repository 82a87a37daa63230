"""Serialize colours as their packed integer.

Not imported by :mod:`rgbcolour` itself. :data:`PydanticColour` needs the
``pydantic`` extra.
"""

from __future__ import annotations

import json
import logging
from typing import Annotated, Any, Dict

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from .colour import UINT32_MAX, Colour
from .errors import ColourDecodeError

LOGGER = logging.getLogger("rgbcolour")


def to_json(colour: Colour) -> str:
    return json.dumps(int(colour))


def from_json(data: str | bytes) -> Colour:
    try:
        value = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        LOGGER.debug("Rejecting colour payload %r: %s", data, exc)
        raise ColourDecodeError(f"invalid colour JSON: {exc}", data) from exc
    # bool is an int subclass; a colour is never true/false
    if isinstance(value, bool) or not isinstance(value, int):
        LOGGER.debug("Rejecting colour payload %r: not an integer", data)
        raise ColourDecodeError(f"expected an integer, got {type(value).__name__}", data)
    if not 0 <= value <= UINT32_MAX:
        LOGGER.debug("Rejecting colour payload %r: out of range", data)
        raise ColourDecodeError(f"colour value {value} is outside 0..{UINT32_MAX}", data)
    return Colour(value)


class ColourJSONEncoder(json.JSONEncoder):
    """Encode any :class:`Colour` in a document as its integer value."""

    def default(self, o: Any) -> Any:
        if isinstance(o, Colour):
            return int(o)
        return super().default(o)


class _ColourPydanticAnnotation:
    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        from_int_schema = core_schema.chain_schema(
            [
                core_schema.int_schema(ge=0, le=UINT32_MAX, strict=True),
                core_schema.no_info_plain_validator_function(Colour),
            ]
        )
        return core_schema.json_or_python_schema(
            json_schema=from_int_schema,
            python_schema=core_schema.union_schema(
                [
                    core_schema.is_instance_schema(Colour),
                    from_int_schema,
                ]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(int),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls,
        _core_schema: core_schema.CoreSchema,
        handler: GetJsonSchemaHandler,
    ) -> JsonSchemaValue:
        schema: Dict[str, Any] = handler(core_schema.int_schema(ge=0, le=UINT32_MAX))
        return schema


PydanticColour = Annotated[Colour, _ColourPydanticAnnotation]
