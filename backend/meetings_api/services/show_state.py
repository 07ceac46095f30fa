"""Seleção corrente do app mobile (qual membro a tela da reunião exibe). Só em memória."""
import logging
import threading

from meetings_api.models.api_models import ShowRequestBody

logger = logging.getLogger(__name__)


class ShowStateStore:
    """Guarda a última seleção enviada pelo app mobile durante a vida do processo."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._current: ShowRequestBody | None = None

    def store(self, body: ShowRequestBody) -> None:
        with self._lock:
            self._current = body
        logger.info("Exibindo membro %s (time %s, iteração %s)", body.member_id, body.team_id, body.iteration)

    def current(self) -> ShowRequestBody | None:
        with self._lock:
            return self._current
