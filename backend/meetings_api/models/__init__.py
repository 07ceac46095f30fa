"""Modelos de domínio e DTOs."""
from meetings_api.models.api_models import (
    HTTPError,
    Iteration,
    Member,
    Project,
    ShowRequestBody,
    StatusResponse,
    Team,
    WorkItem,
)
from meetings_api.models.azure_models import (
    AzureIteration,
    AzureListResponse,
    AzureProject,
    AzureTeam,
    AzureTeamMember,
    WiqlQueryResult,
    WorkItemDetail,
    WorkItemReference,
)

__all__ = [
    "HTTPError",
    "Iteration",
    "Member",
    "Project",
    "ShowRequestBody",
    "StatusResponse",
    "Team",
    "WorkItem",
    "AzureIteration",
    "AzureListResponse",
    "AzureProject",
    "AzureTeam",
    "AzureTeamMember",
    "WiqlQueryResult",
    "WorkItemDetail",
    "WorkItemReference",
]
