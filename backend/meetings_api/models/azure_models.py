"""
Modelos das respostas cruas da API REST do Azure DevOps.

Campos obrigatórios não têm default: payload sem eles falha na validação
(UpstreamError no cliente). Chaves extras são ignoradas, o Azure acrescenta
campos entre versões da API.
"""
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class AzureModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class AzureListResponse(AzureModel, Generic[T]):
    """Envelope padrão das listas: {"count": n, "value": [...]}."""

    count: int
    value: list[T]


class AzureProject(AzureModel):
    id: str
    name: str
    description: Optional[str] = None
    url: str
    state: str


class AzureTeam(AzureModel):
    id: str
    name: str
    description: Optional[str] = None
    url: str
    project_name: Optional[str] = Field(default=None, alias="projectName")
    project_id: Optional[str] = Field(default=None, alias="projectId")


class AzureIdentity(AzureModel):
    id: str
    display_name: str = Field(alias="displayName")
    unique_name: str = Field(alias="uniqueName")
    image_url: Optional[str] = Field(default=None, alias="imageUrl")


class AzureTeamMember(AzureModel):
    identity: AzureIdentity
    is_team_admin: bool = Field(default=False, alias="isTeamAdmin")


class AzureIterationAttributes(AzureModel):
    start_date: Optional[str] = Field(default=None, alias="startDate")
    finish_date: Optional[str] = Field(default=None, alias="finishDate")
    time_frame: Optional[str] = Field(default=None, alias="timeFrame")


class AzureIteration(AzureModel):
    id: str
    name: str
    path: str
    attributes: AzureIterationAttributes
    url: str


class WorkItemReference(AzureModel):
    """Referência mínima devolvida pela WIQL: só o ID é relevante."""

    id: int
    url: Optional[str] = None


class WiqlQueryResult(AzureModel):
    """Resultado da primeira etapa (WIQL). Ordem definida pelo Azure, não estável entre chamadas."""

    work_items: list[WorkItemReference] = Field(alias="workItems")

    @property
    def ids(self) -> list[int]:
        return [ref.id for ref in self.work_items]


class WorkItemDetail(AzureModel):
    """Work Item completo do Azure DevOps."""

    id: int
    rev: int
    fields: dict[str, Any]
    url: str
