"""Esquema simplificado devolvido aos clientes (app mobile e tela de reunião)."""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class Project(BaseModel):
    id: str
    name: str
    description: Optional[str] = None


class Team(BaseModel):
    id: str
    name: str
    description: Optional[str] = None


class Member(BaseModel):
    id: str
    name: str
    email: str
    image_url: Optional[str] = Field(default=None, serialization_alias="imageUrl")


class Iteration(BaseModel):
    id: str
    name: str
    path: str
    start_date: Optional[str] = Field(default=None, serialization_alias="startDate")
    finish_date: Optional[str] = Field(default=None, serialization_alias="finishDate")


class WorkItem(BaseModel):
    """Work Item como devolvido pelo Azure (conteúdo sem alteração)."""

    id: int
    rev: int
    fields: dict[str, Any]
    url: str


class HTTPError(BaseModel):
    code: int
    message: str


class ShowRequestBody(BaseModel):
    """Seleção feita no app mobile: qual membro a tela da reunião deve exibir."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    project_id: str = Field(alias="projectId", min_length=1)
    team_id: str = Field(alias="teamId", min_length=1)
    member_id: str = Field(alias="memberId", min_length=1)
    iteration: str = Field(min_length=1)


class StatusResponse(BaseModel):
    status: str
