"""Orquestração: Work Items de um membro do time em uma iteração (WIQL seguida de leitura por IDs)."""
import logging
import threading

from meetings_api.errors import RequestCancelled, require_params
from meetings_api.models.azure_models import WorkItemDetail
from meetings_api.services.azure_client import AzureDevOpsClient
from meetings_api.utils.wiql import (
    MAX_EMAIL_LENGTH,
    MAX_ITERATION_LENGTH,
    validate_wiql_value,
)

logger = logging.getLogger(__name__)


class WorkItemInteractor:
    """Resolve os Work Items atribuídos a um membro em duas etapas sequenciais, sem retry."""

    def __init__(self, client: AzureDevOpsClient) -> None:
        self.client = client

    def resolve_member_work_items(
        self,
        project_id: str,
        team_id: str,
        member_email: str,
        iteration: str,
        cancel_event: threading.Event | None = None,
    ) -> list[WorkItemDetail]:
        """
        1. WIQL no contexto do time/iteração/membro -> IDs.
        2. Sem IDs: devolve [] sem segunda chamada.
        3. Leitura dos detalhes exatamente para esses IDs.
        Qualquer falha (UpstreamError) aborta a operação inteira; os IDs da etapa 1 são descartados.
        A ordem final é a devolvida pelo Azure na etapa 2 (não necessariamente a da WIQL).
        cancel_event: se sinalizado entre as etapas, a segunda chamada não é feita (RequestCancelled).
        """
        require_params(projectId=project_id, teamId=team_id, memberId=member_email, iteration=iteration)
        member_email = validate_wiql_value("memberId", member_email, MAX_EMAIL_LENGTH)
        iteration = validate_wiql_value("iteration", iteration, MAX_ITERATION_LENGTH)

        wiql_result = self.client.work_items.query_by_wiql(project_id, team_id, member_email, iteration)
        ids = wiql_result.ids
        if not ids:
            logger.info("Nenhum Work Item para %s na iteração %s", member_email, iteration)
            return []

        if cancel_event is not None and cancel_event.is_set():
            logger.info("Requisição cancelada antes da leitura de %d Work Items", len(ids))
            raise RequestCancelled()

        details = self.client.work_items.get_work_items(project_id, ids)
        logger.info("Work Items de %s na iteração %s: %d IDs, %d detalhes", member_email, iteration, len(ids), len(details))
        return details
