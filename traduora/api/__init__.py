"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Traduora API client, a product of Garudex Labs

Traduora REST endpoints, grouped the way the server groups them:

* ``traduora.api.auth`` - providers, signup, token exchange, password change
* ``traduora.api.users`` - the current user
* ``traduora.api.projects`` - projects
* ``traduora.api.terms`` - terms of a project
* ``traduora.api.locales`` - locales known to the server
* ``traduora.api.translations`` - project locales and their translations
* ``traduora.api.labels`` - label models
"""

from traduora.api.common import (
    AccessDates,
    ApiModel,
    BearerToken,
    Identifier,
    MimeTypes,
    ProjectId,
    Role,
    TermId,
    UserId,
)

__all__ = [
    "AccessDates",
    "ApiModel",
    "BearerToken",
    "Identifier",
    "MimeTypes",
    "ProjectId",
    "Role",
    "TermId",
    "UserId",
]
