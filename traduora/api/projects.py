"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Traduora API client, a product of Garudex Labs

Project endpoints.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List, Optional, Union

from traduora.api.common import AccessDates, ApiModel, ProjectId, Role
from traduora.endpoint import AuthenticatedEndpoint, Method, coerce_fields, drop_none


class Project(ApiModel):
    """A translation project and the caller's role in it."""

    id: ProjectId
    name: str
    description: str
    locales_count: int
    terms_count: int
    role: Role
    date: AccessDates


@dataclass(frozen=True)
class Projects(AuthenticatedEndpoint[List[Project]]):
    """List all projects the user has access to.

    **Endpoint** ``GET /api/v1/projects``
    """

    http_method: ClassVar[Method] = Method.GET
    path_template: ClassVar[str] = "projects"
    model: ClassVar[Any] = List[Project]


@dataclass(frozen=True)
class CreateProject(AuthenticatedEndpoint[Project]):
    """Create a project. The caller becomes its admin.

    **Endpoint** ``POST /api/v1/projects``
    """

    name: str
    description: str = ""

    http_method: ClassVar[Method] = Method.POST
    path_template: ClassVar[str] = "projects"
    model: ClassVar[Any] = Project

    def payload(self) -> Dict[str, Any]:
        return {"name": self.name, "description": self.description}


@dataclass(frozen=True)
class ShowProject(AuthenticatedEndpoint[Project]):
    """Get a single project.

    **Endpoint** ``GET /api/v1/projects/{projectId}``
    """

    project_id: Union[ProjectId, str]

    http_method: ClassVar[Method] = Method.GET
    path_template: ClassVar[str] = "projects/{project_id}"
    model: ClassVar[Any] = Project

    def __post_init__(self) -> None:
        coerce_fields(self, project_id=ProjectId)


@dataclass(frozen=True)
class EditProject(AuthenticatedEndpoint[Project]):
    """Change name and/or description of a project.

    **Endpoint** ``PATCH /api/v1/projects/{projectId}``
    """

    project_id: Union[ProjectId, str]
    name: Optional[str] = None
    description: Optional[str] = None

    http_method: ClassVar[Method] = Method.PATCH
    path_template: ClassVar[str] = "projects/{project_id}"
    model: ClassVar[Any] = Project

    def __post_init__(self) -> None:
        coerce_fields(self, project_id=ProjectId)

    def payload(self) -> Dict[str, Any]:
        return drop_none({"name": self.name, "description": self.description})


@dataclass(frozen=True)
class DeleteProject(AuthenticatedEndpoint[None]):
    """Delete a project with all its terms and translations.

    **Endpoint** ``DELETE /api/v1/projects/{projectId}``
    """

    project_id: Union[ProjectId, str]

    http_method: ClassVar[Method] = Method.DELETE
    path_template: ClassVar[str] = "projects/{project_id}"
    model: ClassVar[Any] = None
    envelope: ClassVar[bool] = False

    def __post_init__(self) -> None:
        coerce_fields(self, project_id=ProjectId)
