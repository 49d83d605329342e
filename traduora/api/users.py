"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Traduora API client, a product of Garudex Labs

Endpoints about the current user.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional

from traduora.api.common import ApiModel, UserId
from traduora.endpoint import AuthenticatedEndpoint, Method, drop_none


class UserInfo(ApiModel):
    """Information about a user account."""

    id: UserId
    name: str
    email: str
    num_projects_created: int


@dataclass(frozen=True)
class Me(AuthenticatedEndpoint[UserInfo]):
    """Get the current user's profile.

    **Endpoint** ``GET /api/v1/users/me``
    """

    http_method: ClassVar[Method] = Method.GET
    path_template: ClassVar[str] = "users/me"
    model: ClassVar[Any] = UserInfo


@dataclass(frozen=True)
class EditMe(AuthenticatedEndpoint[UserInfo]):
    """Update the current user's profile. Unset fields stay unchanged.

    **Endpoint** ``PATCH /api/v1/users/me``
    """

    name: Optional[str] = None
    email: Optional[str] = None

    http_method: ClassVar[Method] = Method.PATCH
    path_template: ClassVar[str] = "users/me"
    model: ClassVar[Any] = UserInfo

    def payload(self) -> Dict[str, Any]:
        return drop_none({"name": self.name, "email": self.email})


@dataclass(frozen=True)
class DeleteMe(AuthenticatedEndpoint[None]):
    """Delete the current user's account.

    **Endpoint** ``DELETE /api/v1/users/me``
    """

    http_method: ClassVar[Method] = Method.DELETE
    path_template: ClassVar[str] = "users/me"
    model: ClassVar[Any] = None
    envelope: ClassVar[bool] = False
