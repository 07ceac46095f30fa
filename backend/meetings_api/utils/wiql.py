"""Montagem segura de consultas WIQL (literais validados e escapados)."""
import re

from meetings_api.errors import InvalidRequest

# Limites de tamanho para valores interpolados em literais WIQL
MAX_EMAIL_LENGTH = 256
MAX_ITERATION_LENGTH = 512

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


def escape_wiql_literal(value: str) -> str:
    """Escapa aspas simples para uso dentro de '...' na WIQL."""
    return value.replace("'", "''")


def validate_wiql_value(name: str, value: str | None, max_length: int) -> str:
    """
    Valida um valor que será interpolado na WIQL.
    Rejeita vazio, caracteres de controle e tamanho acima de max_length (InvalidRequest com o nome do parâmetro).
    """
    if value is None or not value.strip():
        raise InvalidRequest(name)
    if _CONTROL_CHARS.search(value):
        raise InvalidRequest(name, f"{name} contains invalid characters")
    if len(value) > max_length:
        raise InvalidRequest(name, f"{name} must be at most {max_length} characters")
    return value.strip()


def build_member_work_items_query(member_email: str, iteration: str) -> str:
    """
    WIQL dos Work Items atribuídos ao membro na iteração.
    Executada no contexto do time (URL {project}/{team}/_apis/wit/wiql): @project resolve para o projeto
    e @TeamAreas para as áreas do time, restringindo o resultado aos Work Items do time.
    iteration é o caminho da iteração (campo path de teams/iterations/list).
    """
    email = escape_wiql_literal(validate_wiql_value("memberId", member_email, MAX_EMAIL_LENGTH))
    path = escape_wiql_literal(validate_wiql_value("iteration", iteration, MAX_ITERATION_LENGTH))
    return (
        "SELECT [System.Id] FROM WorkItems "
        "WHERE [System.TeamProject] = @project "
        "AND [System.AreaPath] IN @TeamAreas "
        f"AND [System.IterationPath] = '{path}' "
        f"AND [System.AssignedTo] = '{email}' "
        "ORDER BY [System.Id]"
    )
