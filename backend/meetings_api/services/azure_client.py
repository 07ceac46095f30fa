"""Cliente Azure DevOps REST API: projetos, times, membros, iterações e Work Items."""
import base64
import logging
from typing import Any, Sequence, TypeVar
from urllib.parse import quote

import requests
from pydantic import BaseModel, ValidationError
from requests.adapters import HTTPAdapter

from meetings_api.config import Settings
from meetings_api.errors import UpstreamError
from meetings_api.models.azure_models import (
    AzureIteration,
    AzureListResponse,
    AzureProject,
    AzureTeam,
    AzureTeamMember,
    WiqlQueryResult,
    WorkItemDetail,
)
from meetings_api.utils.wiql import build_member_work_items_query

logger = logging.getLogger(__name__)

# Limite de IDs por chamada em wit/workitems
WORK_ITEMS_BATCH_SIZE = 200

M = TypeVar("M", bound=BaseModel)


class AzureDevOpsClient:
    """
    Cliente HTTP autenticado para o Azure DevOps. Uma única sessão (basic auth com usuário vazio e PAT)
    compartilhada pelos sub-recursos projects, teams e work_items. Sem retry: a primeira falha vira UpstreamError.
    """

    def __init__(self, settings: Settings, session: requests.Session | None = None) -> None:
        settings.validate_pat()
        self.settings = settings
        self.org_url = settings.azure_devops_org_url
        self.timeout = settings.AZURE_DEVOPS_TIMEOUT
        self._pat = settings.AZURE_DEVOPS_PAT
        if session is None:
            session = requests.Session()
            adapter = HTTPAdapter(pool_connections=10, pool_maxsize=20, max_retries=0)
            session.mount("http://", adapter)
            session.mount("https://", adapter)
        self.session = session
        self.session.headers.update({
            "Authorization": f"Basic {self._encode_pat()}",
            "Accept": "application/json",
        })
        self.projects = ProjectsService(self)
        self.teams = TeamsService(self)
        self.work_items = WorkItemsService(self)

    def _encode_pat(self) -> str:
        return base64.b64encode(f":{self._pat}".encode("utf-8")).decode("utf-8")

    def url(self, *segments: str, endpoint: str) -> str:
        """Monta {org}/{segmentos codificados}/_apis/{endpoint}."""
        parts = [self.org_url, *(quote(s, safe="", encoding="utf-8") for s in segments), "_apis", endpoint]
        return "/".join(parts)

    def request(
        self,
        method: str,
        url: str,
        *,
        api_version: str,
        params: dict | None = None,
        json: Any = None,
    ) -> Any:
        """Executa a chamada e devolve o JSON decodificado. Qualquer falha vira UpstreamError."""
        merged = {**(params or {}), "api-version": api_version}
        logger.debug("Azure DevOps %s %s", method, url)
        try:
            r = self.session.request(method=method, url=url, params=merged, json=json, timeout=self.timeout)
        except requests.Timeout as e:
            raise UpstreamError(f"Timeout após {self.timeout}s em {method} {url}") from e
        except requests.RequestException as e:
            raise UpstreamError(f"Falha de comunicação em {method} {url}: {e.__class__.__name__}") from e

        if r.status_code in (401, 403) or "/_signin" in (r.url or ""):
            raise UpstreamError("Erro de autenticação. Verifique AZURE_DEVOPS_PAT.", status_code=r.status_code)
        if not 200 <= r.status_code < 300:
            raise UpstreamError(f"Azure DevOps respondeu {r.status_code} em {method} {url}", r.status_code, r.text)
        if "text/html" in (r.headers.get("Content-Type") or ""):
            raise UpstreamError(f"Resposta inesperada (HTML). Status: {r.status_code}", r.status_code)
        try:
            return r.json()
        except ValueError as e:
            raise UpstreamError("Resposta do Azure DevOps não é JSON válido", r.status_code, r.text) from e

    @staticmethod
    def parse(model: type[M], data: Any) -> M:
        """Valida o payload contra o modelo; formato inesperado vira UpstreamError."""
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise UpstreamError(
                f"Payload do Azure DevOps fora do formato esperado ({model.__name__}): {e.error_count()} erro(s)"
            ) from e

    def close(self) -> None:
        self.session.close()


class ProjectsService:
    """Projetos da organização e times de um projeto."""

    def __init__(self, client: AzureDevOpsClient) -> None:
        self._client = client

    def list_projects(self) -> list[AzureProject]:
        c = self._client
        data = c.request("GET", c.url(endpoint="projects"), api_version=c.settings.PROJECTS_API_VERSION)
        return c.parse(AzureListResponse[AzureProject], data).value

    def list_project_teams(self, project_id: str) -> list[AzureTeam]:
        c = self._client
        url = c.url(endpoint=f"projects/{quote(project_id, safe='')}/teams")
        data = c.request("GET", url, api_version=c.settings.PROJECT_TEAMS_API_VERSION)
        return c.parse(AzureListResponse[AzureTeam], data).value


class TeamsService:
    """Membros e iterações (sprints) de um time."""

    def __init__(self, client: AzureDevOpsClient) -> None:
        self._client = client

    def list_team_members(self, project_id: str, team_id: str) -> list[AzureTeamMember]:
        c = self._client
        url = c.url(endpoint=f"projects/{quote(project_id, safe='')}/teams/{quote(team_id, safe='')}/members")
        data = c.request("GET", url, api_version=c.settings.TEAMS_API_VERSION)
        return c.parse(AzureListResponse[AzureTeamMember], data).value

    def list_team_iterations(self, project_id: str, team_id: str) -> list[AzureIteration]:
        c = self._client
        url = c.url(project_id, team_id, endpoint="work/teamsettings/iterations")
        data = c.request("GET", url, api_version=c.settings.TEAMS_API_VERSION)
        return c.parse(AzureListResponse[AzureIteration], data).value


class WorkItemsService:
    """WIQL e leitura de Work Items por IDs."""

    def __init__(self, client: AzureDevOpsClient) -> None:
        self._client = client

    def query_by_wiql(self, project_id: str, team_id: str, member_email: str, iteration: str) -> WiqlQueryResult:
        """Consulta WIQL no contexto do time: IDs dos Work Items do membro na iteração."""
        c = self._client
        wiql = {"query": build_member_work_items_query(member_email, iteration)}
        url = c.url(project_id, team_id, endpoint="wit/wiql")
        data = c.request("POST", url, api_version=c.settings.WORK_ITEMS_API_VERSION, json=wiql)
        return c.parse(WiqlQueryResult, data)

    def get_work_items(self, project_id: str, ids: Sequence[int]) -> list[WorkItemDetail]:
        """
        Obtém Work Items pelos IDs, em lotes de WORK_ITEMS_BATCH_SIZE (limite da API).
        Lista vazia não chama o Azure. A ordem devolvida é a do Azure, sem garantia de seguir a de ids.
        """
        if not ids:
            return []
        c = self._client
        url = c.url(project_id, endpoint="wit/workitems")
        out: list[WorkItemDetail] = []
        for i in range(0, len(ids), WORK_ITEMS_BATCH_SIZE):
            batch = ids[i : i + WORK_ITEMS_BATCH_SIZE]
            data = c.request(
                "GET",
                url,
                api_version=c.settings.WORK_ITEMS_API_VERSION,
                params={"ids": ",".join(str(wi_id) for wi_id in batch)},
            )
            out.extend(c.parse(AzureListResponse[WorkItemDetail], data).value)
        return out
