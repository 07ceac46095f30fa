"""Rotas /mobile: o app escolhe qual membro a tela da reunião exibe."""
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from meetings_api.dependencies import get_show_state
from meetings_api.models.api_models import HTTPError, ShowRequestBody, StatusResponse
from meetings_api.services.show_state import ShowStateStore

router = APIRouter(prefix="/mobile", tags=["Mobile"])


@router.post(
    "/control/show",
    response_model=StatusResponse,
    responses={400: {"model": HTTPError, "description": "Corpo da requisição inválido"}},
)
def show_member_work_items(body: ShowRequestBody, store: ShowStateStore = Depends(get_show_state)):
    """Troca o membro exibido na tela da reunião."""
    store.store(body)
    return StatusResponse(status="OK")


@router.get(
    "/control/show",
    response_model=ShowRequestBody,
    responses={404: {"model": HTTPError, "description": "Nenhum membro selecionado"}},
)
def get_shown_member(store: ShowStateStore = Depends(get_show_state)):
    """Seleção corrente (consultada pela tela da reunião)."""
    current = store.current()
    if current is None:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"code": status.HTTP_404_NOT_FOUND, "message": "No member selected"},
        )
    return current
