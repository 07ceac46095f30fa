"""Conversão das respostas do Azure DevOps para o esquema simplificado."""
from meetings_api.models.api_models import Iteration, Member, Project, Team, WorkItem
from meetings_api.models.azure_models import (
    AzureIteration,
    AzureProject,
    AzureTeam,
    AzureTeamMember,
    WorkItemDetail,
)


def from_azure_projects(projects: list[AzureProject]) -> list[Project]:
    return [Project(id=p.id, name=p.name, description=p.description) for p in projects]


def from_azure_teams(teams: list[AzureTeam]) -> list[Team]:
    return [Team(id=t.id, name=t.name, description=t.description) for t in teams]


def from_azure_members(members: list[AzureTeamMember]) -> list[Member]:
    """uniqueName do Azure é o e-mail do membro (usado depois como memberId)."""
    return [
        Member(
            id=m.identity.id,
            name=m.identity.display_name,
            email=m.identity.unique_name,
            image_url=m.identity.image_url,
        )
        for m in members
    ]


def from_azure_iterations(iterations: list[AzureIteration]) -> list[Iteration]:
    return [
        Iteration(
            id=it.id,
            name=it.name,
            path=it.path,
            start_date=it.attributes.start_date,
            finish_date=it.attributes.finish_date,
        )
        for it in iterations
    ]


def from_azure_work_items(work_items: list[WorkItemDetail]) -> list[WorkItem]:
    return [WorkItem(id=wi.id, rev=wi.rev, fields=wi.fields, url=wi.url) for wi in work_items]
