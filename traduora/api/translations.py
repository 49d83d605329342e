"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Traduora API client, a product of Garudex Labs

Translation endpoints: the locales a project is translated into and the
translated values of its terms.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List, Optional, Union

from traduora.api.common import AccessDates, ApiModel, Identifier, ProjectId, TermId
from traduora.api.labels import Label
from traduora.api.locales import Locale, LocaleCode
from traduora.endpoint import AuthenticatedEndpoint, Method, coerce_fields


class ProjectLocaleId(Identifier):
    """Type-safe wrapper for a project locale id."""

    __slots__ = ()


class ProjectLocale(ApiModel):
    """A locale enabled for a project."""

    id: ProjectLocaleId
    locale: Locale
    date: AccessDates


class Translation(ApiModel):
    """The value of one term in one locale."""

    term_id: TermId
    value: str
    labels: List[Union[Label, str]] = []
    date: Optional[AccessDates] = None


@dataclass(frozen=True)
class ProjectLocales(AuthenticatedEndpoint[List[ProjectLocale]]):
    """List all locales of a project.

    **Endpoint** ``GET /api/v1/projects/{projectId}/translations``
    """

    project_id: Union[ProjectId, str]

    http_method: ClassVar[Method] = Method.GET
    path_template: ClassVar[str] = "projects/{project_id}/translations"
    model: ClassVar[Any] = List[ProjectLocale]

    def __post_init__(self) -> None:
        coerce_fields(self, project_id=ProjectId)


@dataclass(frozen=True)
class CreateLocale(AuthenticatedEndpoint[ProjectLocale]):
    """Add a locale to a project.

    **Endpoint** ``POST /api/v1/projects/{projectId}/translations``
    """

    project_id: Union[ProjectId, str]
    code: Union[LocaleCode, str]

    http_method: ClassVar[Method] = Method.POST
    path_template: ClassVar[str] = "projects/{project_id}/translations"
    model: ClassVar[Any] = ProjectLocale

    def __post_init__(self) -> None:
        coerce_fields(self, project_id=ProjectId, code=LocaleCode)

    def payload(self) -> Dict[str, Any]:
        return {"code": self.code}


@dataclass(frozen=True)
class DeleteLocale(AuthenticatedEndpoint[None]):
    """Remove a locale and all its translations from a project.

    **Endpoint** ``DELETE /api/v1/projects/{projectId}/translations/{localeCode}``
    """

    project_id: Union[ProjectId, str]
    locale: Union[LocaleCode, str]

    http_method: ClassVar[Method] = Method.DELETE
    path_template: ClassVar[str] = "projects/{project_id}/translations/{locale}"
    model: ClassVar[Any] = None
    envelope: ClassVar[bool] = False

    def __post_init__(self) -> None:
        coerce_fields(self, project_id=ProjectId, locale=LocaleCode)


@dataclass(frozen=True)
class Translations(AuthenticatedEndpoint[List[Translation]]):
    """List all translations of a project in one locale.

    **Endpoint** ``GET /api/v1/projects/{projectId}/translations/{localeCode}``
    """

    project_id: Union[ProjectId, str]
    locale: Union[LocaleCode, str]

    http_method: ClassVar[Method] = Method.GET
    path_template: ClassVar[str] = "projects/{project_id}/translations/{locale}"
    model: ClassVar[Any] = List[Translation]

    def __post_init__(self) -> None:
        coerce_fields(self, project_id=ProjectId, locale=LocaleCode)


@dataclass(frozen=True)
class EditTranslation(AuthenticatedEndpoint[Translation]):
    """Set the translated value of a term.

    **Endpoint** ``PATCH /api/v1/projects/{projectId}/translations/{localeCode}``
    """

    project_id: Union[ProjectId, str]
    locale: Union[LocaleCode, str]
    term_id: Union[TermId, str]
    value: str

    http_method: ClassVar[Method] = Method.PATCH
    path_template: ClassVar[str] = "projects/{project_id}/translations/{locale}"
    model: ClassVar[Any] = Translation

    def __post_init__(self) -> None:
        coerce_fields(self, project_id=ProjectId, locale=LocaleCode, term_id=TermId)

    def payload(self) -> Dict[str, Any]:
        return {"termId": self.term_id, "value": self.value}
