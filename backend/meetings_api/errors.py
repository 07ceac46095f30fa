"""
Exceções da API.

Os serviços levantam estas exceções; a tradução para status HTTP acontece
apenas nos exception handlers registrados em main.py.
"""
from typing import Optional, Sequence

# Mensagem devolvida ao cliente em qualquer falha do Azure DevOps (detalhes ficam só no log)
UPSTREAM_ERROR_MESSAGE = "Failed to receive data from Azure"

# Corpo de resposta do Azure gravado no log é truncado neste tamanho
MAX_LOGGED_BODY = 500


class MeetingsApiError(Exception):
    """Base das exceções da API."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict:
        """Payload devolvido ao cliente (formato code/message)."""
        return {"code": self.status_code, "message": self.message}


class InvalidRequest(MeetingsApiError):
    """Parâmetro obrigatório ausente ou inválido."""

    status_code = 400

    def __init__(self, params: Sequence[str] | str, message: Optional[str] = None) -> None:
        self.params = [params] if isinstance(params, str) else list(params)
        if message is None:
            message = f"{', '.join(self.params)} must be provided"
        super().__init__(message)


class UpstreamError(MeetingsApiError):
    """
    Falha ao conversar com o Azure DevOps (rede, timeout, autenticação, status não-2xx,
    corpo malformado). status_code_upstream e body servem apenas para log.
    """

    status_code = 500

    def __init__(
        self,
        message: str = UPSTREAM_ERROR_MESSAGE,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ) -> None:
        self.upstream_status = status_code
        self.body = body[:MAX_LOGGED_BODY] if body else None
        super().__init__(message)

    def __str__(self) -> str:
        if self.upstream_status:
            return f"[{self.upstream_status}] {self.message}"
        return self.message

    def to_dict(self) -> dict:
        return {"code": self.status_code, "message": UPSTREAM_ERROR_MESSAGE}


class RequestCancelled(MeetingsApiError):
    """A requisição de entrada foi cancelada antes da próxima chamada ao Azure."""

    status_code = 503

    def __init__(self, message: str = "Request cancelled") -> None:
        super().__init__(message)


def require_params(**params: Optional[str]) -> None:
    """InvalidRequest com todos os parâmetros vazios, na ordem recebida (nomes como expostos na API)."""
    missing = [name for name, value in params.items() if not value or not value.strip()]
    if missing:
        raise InvalidRequest(missing)
