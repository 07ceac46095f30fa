"""Dependências FastAPI: recursos compartilhados criados no startup (somente leitura por requisição)."""
from fastapi import Depends, Request

from meetings_api.errors import UpstreamError
from meetings_api.services.azure_client import AzureDevOpsClient
from meetings_api.services.show_state import ShowStateStore
from meetings_api.services.work_item_interactor import WorkItemInteractor


def get_azure_client(request: Request) -> AzureDevOpsClient:
    client = getattr(request.app.state, "azure_client", None)
    if client is None:
        raise UpstreamError("Cliente Azure DevOps não configurado (AZURE_DEVOPS_ORG / AZURE_DEVOPS_PAT)")
    return client


def get_work_item_interactor(client: AzureDevOpsClient = Depends(get_azure_client)) -> WorkItemInteractor:
    return WorkItemInteractor(client)


def get_show_state(request: Request) -> ShowStateStore:
    return request.app.state.show_state
