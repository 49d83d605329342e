"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Traduora API client, a product of Garudex Labs

Label models. Labels are attached to terms and translations.
"""

from __future__ import annotations

from traduora.api.common import ApiModel, Identifier


class LabelId(Identifier):
    """Type-safe label id wrapper."""

    __slots__ = ()


class Label(ApiModel):
    id: LabelId
    value: str
    color: str
