"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Traduora API client, a product of Garudex Labs

Types shared by several endpoint groups: identifier wrappers, the model
base class, access dates and project roles.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, GetCoreSchemaHandler
from pydantic.alias_generators import to_camel
from pydantic_core import core_schema


class Identifier:
    """Type-safe wrapper around an opaque string identifier.

    Identifiers of different kinds never compare equal, even when they wrap
    the same string, and one kind cannot be built from another. Plain
    strings are accepted everywhere an identifier is expected.
    """

    __slots__ = ("_value",)

    def __init__(self, value: Union[str, "Identifier"]) -> None:
        if isinstance(value, Identifier):
            if type(value) is not type(self):
                raise TypeError(
                    f"cannot use {type(value).__name__} as {type(self).__name__}"
                )
            value = value.value
        if not isinstance(value, str):
            raise TypeError(
                f"{type(self).__name__} expects a string, got {type(value).__name__}"
            )
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def value(self) -> str:
        """The wrapped string."""
        return self._value

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value  # type: ignore[attr-defined]

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value < other._value  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    @classmethod
    def coerce(cls, value: Union[str, "Identifier"]):
        """Return ``value`` as this identifier kind."""
        if type(value) is cls:
            return value
        return cls(value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        from_str = core_schema.no_info_after_validator_function(
            cls, core_schema.str_schema()
        )
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_str]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )


class BearerToken(Identifier):
    """Type-safe access token wrapper. The repr never shows the token."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "BearerToken('***')"


class UserId(Identifier):
    """Type-safe user id wrapper."""

    __slots__ = ()


class ProjectId(Identifier):
    """Type-safe project id wrapper."""

    __slots__ = ()


class TermId(Identifier):
    """Type-safe term id wrapper."""

    __slots__ = ()


class ApiModel(BaseModel):
    """Base class for decoded response models.

    Field names are snake_case in Python and camelCase on the wire. Unknown
    fields are ignored so that new server fields do not break decoding.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class AccessDates(ApiModel):
    """Timestamps about the latest interactions with an object.

    What exactly the object is depends on the endpoint returning it.
    """

    created: datetime
    modified: datetime


class Role(str, Enum):
    """Project-specific role of a user.

    The creator of a project becomes its admin. For a detailed overview of
    what role may access which endpoint, see
    https://docs.traduora.co/docs/api/v1/roles-permissions.
    """

    ADMIN = "admin"
    EDITOR = "editor"
    VIEWER = "viewer"


class MimeTypes:
    JSON = "application/json"
