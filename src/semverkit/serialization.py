# SPDX-License-Identifier: MIT
"""Pydantic support for serializing versions as their canonical string.

Annotate model fields with :data:`SemVerString` to accept version text on
input and emit ``str(version)`` in JSON output:

    >>> from pydantic import BaseModel
    >>> class Release(BaseModel):
    ...     version: SemVerString
    >>> Release(version="1.0.0-rc.1").version.is_prerelease
    True
    >>> Release(version="1.0.0-rc.1").model_dump_json()
    '{"version":"1.0.0-rc.1"}'

Invalid text raises a pydantic ``ValidationError`` whose message carries the
parse error; the parse error itself is chained as ``__cause__`` of the
``ValueError`` in the error context.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler, TypeAdapter
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from .result import Failure
from .version import Version


def _validate_version(value: Any) -> Version:
    if isinstance(value, Version):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Semantic version must be a string, got {type(value).__name__}")

    result = Version.parse(value)
    if isinstance(result, Failure):
        raise ValueError(f"Invalid semantic version: {value}: {result.error.message}") from result.error
    return result.value


class _SemVerStringAnnotation:
    """Pydantic schema hooks that delegate to ``Version.parse`` and ``str()``."""

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            _validate_version,
            serialization=core_schema.to_string_ser_schema(),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, _core_schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {
            "type": "string",
            "description": "Semantic version (SemVer 2.0.0)",
            "examples": ["1.0.0", "2.1.0-rc.1+build.5"],
        }


SemVerString = Annotated[Version, _SemVerStringAnnotation]

_adapter: TypeAdapter[Version] = TypeAdapter(SemVerString)


def load_version(data: str | bytes) -> Version:
    """Deserialize a JSON string value (e.g. ``'"1.0.0"'``) into a Version.

    Raises:
        pydantic.ValidationError: If the JSON is not a valid version string
    """
    return _adapter.validate_json(data)


def dump_version(version: Version) -> str:
    """Serialize a Version to a JSON string value."""
    return _adapter.dump_json(version).decode()
