"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Traduora API client, a product of Garudex Labs

Term endpoints. A term is the key that gets translated into each locale
of a project.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List, Optional, Union

from traduora.api.common import AccessDates, ApiModel, ProjectId, TermId
from traduora.api.labels import Label
from traduora.endpoint import AuthenticatedEndpoint, Method, coerce_fields


class Term(ApiModel):
    """A translation term.

    ``date`` is absent from some responses, e.g. right after creation on
    older servers. Labels are plain strings or full label objects depending
    on the server version.
    """

    id: TermId
    value: str
    labels: List[Union[Label, str]] = []
    date: Optional[AccessDates] = None


@dataclass(frozen=True)
class Terms(AuthenticatedEndpoint[List[Term]]):
    """List all terms of a project.

    **Endpoint** ``GET /api/v1/projects/{projectId}/terms``
    """

    project_id: Union[ProjectId, str]

    http_method: ClassVar[Method] = Method.GET
    path_template: ClassVar[str] = "projects/{project_id}/terms"
    model: ClassVar[Any] = List[Term]

    def __post_init__(self) -> None:
        coerce_fields(self, project_id=ProjectId)


@dataclass(frozen=True)
class CreateTerm(AuthenticatedEndpoint[Term]):
    """Create a term in a project.

    **Endpoint** ``POST /api/v1/projects/{projectId}/terms``

    Example::

        term = CreateTerm(value="hello.world", project_id=project).query(client)
    """

    value: str
    project_id: Union[ProjectId, str]

    http_method: ClassVar[Method] = Method.POST
    path_template: ClassVar[str] = "projects/{project_id}/terms"
    model: ClassVar[Any] = Term

    def __post_init__(self) -> None:
        coerce_fields(self, project_id=ProjectId)

    def payload(self) -> Dict[str, Any]:
        return {"value": self.value}


@dataclass(frozen=True)
class EditTerm(AuthenticatedEndpoint[Term]):
    """Rename a term.

    **Endpoint** ``PATCH /api/v1/projects/{projectId}/terms/{termId}``
    """

    project_id: Union[ProjectId, str]
    term_id: Union[TermId, str]
    value: str

    http_method: ClassVar[Method] = Method.PATCH
    path_template: ClassVar[str] = "projects/{project_id}/terms/{term_id}"
    model: ClassVar[Any] = Term

    def __post_init__(self) -> None:
        coerce_fields(self, project_id=ProjectId, term_id=TermId)

    def payload(self) -> Dict[str, Any]:
        return {"value": self.value}


@dataclass(frozen=True)
class DeleteTerm(AuthenticatedEndpoint[None]):
    """Delete a term and its translations.

    **Endpoint** ``DELETE /api/v1/projects/{projectId}/terms/{termId}``
    """

    project_id: Union[ProjectId, str]
    term_id: Union[TermId, str]

    http_method: ClassVar[Method] = Method.DELETE
    path_template: ClassVar[str] = "projects/{project_id}/terms/{term_id}"
    model: ClassVar[Any] = None
    envelope: ClassVar[bool] = False

    def __post_init__(self) -> None:
        coerce_fields(self, project_id=ProjectId, term_id=TermId)
