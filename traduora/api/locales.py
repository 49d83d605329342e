"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Traduora API client, a product of Garudex Labs

Locales supported by the server.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, List

from traduora.api.common import ApiModel, Identifier
from traduora.endpoint import AuthenticatedEndpoint, Method


class LocaleCode(Identifier):
    """Type-safe locale code wrapper, e.g. ``de_DE`` or ``en``."""

    __slots__ = ()


class Locale(ApiModel):
    """A locale as known to the server."""

    code: LocaleCode
    language: str
    region: str


@dataclass(frozen=True)
class Locales(AuthenticatedEndpoint[List[Locale]]):
    """List all locales the server supports.

    **Endpoint** ``GET /api/v1/locales``
    """

    http_method: ClassVar[Method] = Method.GET
    path_template: ClassVar[str] = "locales"
    model: ClassVar[Any] = List[Locale]
