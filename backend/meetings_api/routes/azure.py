"""Rotas /azure: projetos, times, membros, iterações e Work Items de um membro."""
import asyncio
import logging
import threading
from functools import partial

import anyio.to_thread
from fastapi import APIRouter, Depends, Path, Query

from meetings_api.dependencies import get_azure_client, get_work_item_interactor
from meetings_api.errors import require_params
from meetings_api.models.api_models import HTTPError, Iteration, Member, Project, Team, WorkItem
from meetings_api.models.mappers import (
    from_azure_iterations,
    from_azure_members,
    from_azure_projects,
    from_azure_teams,
    from_azure_work_items,
)
from meetings_api.services.azure_client import AzureDevOpsClient
from meetings_api.services.work_item_interactor import WorkItemInteractor

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/azure", tags=["Azure"])

_ERROR_RESPONSES = {
    400: {"model": HTTPError, "description": "Parâmetro obrigatório ausente"},
    500: {"model": HTTPError, "description": "Falha ao obter dados do Azure"},
}


@router.get("/projects/list", response_model=list[Project], responses={500: _ERROR_RESPONSES[500]})
def get_projects_list(client: AzureDevOpsClient = Depends(get_azure_client)):
    """Lista de projetos da organização."""
    return from_azure_projects(client.projects.list_projects())


@router.get("/teams/list", response_model=list[Team], responses=_ERROR_RESPONSES)
def get_project_teams(
    project_id: str = Query("", alias="projectId"),
    client: AzureDevOpsClient = Depends(get_azure_client),
):
    """Lista de times do projeto."""
    require_params(projectId=project_id)
    return from_azure_teams(client.projects.list_project_teams(project_id))


@router.get("/teams/members/list", response_model=list[Member], responses=_ERROR_RESPONSES)
def get_team_members(
    project_id: str = Query("", alias="projectId"),
    team_id: str = Query("", alias="teamId"),
    client: AzureDevOpsClient = Depends(get_azure_client),
):
    """Membros do time."""
    require_params(projectId=project_id, teamId=team_id)
    return from_azure_members(client.teams.list_team_members(project_id, team_id))


@router.get("/teams/iterations/list", response_model=list[Iteration], responses=_ERROR_RESPONSES)
def get_team_iterations(
    project_id: str = Query("", alias="projectId"),
    team_id: str = Query("", alias="teamId"),
    client: AzureDevOpsClient = Depends(get_azure_client),
):
    """Sprints do time."""
    require_params(projectId=project_id, teamId=team_id)
    return from_azure_iterations(client.teams.list_team_iterations(project_id, team_id))


@router.get("/members/{member_id}/workItems/list", response_model=list[WorkItem], responses=_ERROR_RESPONSES)
@router.get("/members/{member_id}/workItems", response_model=list[WorkItem], responses=_ERROR_RESPONSES)
async def get_member_work_items(
    member_id: str = Path(..., description="E-mail do membro"),
    project_id: str = Query("", alias="projectId"),
    team_id: str = Query("", alias="teamId"),
    iteration: str = Query("", description="Caminho da iteração"),
    interactor: WorkItemInteractor = Depends(get_work_item_interactor),
):
    """
    Work Items atribuídos ao membro na iteração.
    As chamadas ao Azure rodam em worker thread. Se esta corrotina for cancelada (cliente desconectou),
    ela não espera a thread: o evento é sinalizado e a thread para antes da segunda chamada.
    """
    cancel_event = threading.Event()
    try:
        details = await anyio.to_thread.run_sync(
            partial(
                interactor.resolve_member_work_items,
                project_id,
                team_id,
                member_id,
                iteration,
                cancel_event=cancel_event,
            ),
            abandon_on_cancel=True,
        )
    except asyncio.CancelledError:
        cancel_event.set()
        logger.info("Requisição de Work Items de %s cancelada pelo cliente", member_id)
        raise
    return from_azure_work_items(details)
