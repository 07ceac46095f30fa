"""FastAPI app: proxy simplificado da API REST do Azure DevOps para o app mobile e a tela de reunião."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from meetings_api.config import get_settings
from meetings_api.errors import InvalidRequest, RequestCancelled, UpstreamError
from meetings_api.routes import azure, mobile
from meetings_api.services.azure_client import AzureDevOpsClient
from meetings_api.services.show_state import ShowStateStore

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    provider = app.dependency_overrides.get(get_settings, get_settings)
    try:
        app.state.azure_client = AzureDevOpsClient(provider())
    except ValueError as e:
        # sobe mesmo assim (health responde); rotas /azure devolvem 500
        logger.error("Cliente Azure DevOps não inicializado: %s", e)
        app.state.azure_client = None
    yield
    if app.state.azure_client is not None:
        app.state.azure_client.close()
        app.state.azure_client = None


app = FastAPI(
    title="Databriz Meetings API",
    description="Proxy simplificado do Azure DevOps: projetos, times, sprints e Work Items por membro",
    lifespan=lifespan,
)
app.state.azure_client = None
app.state.show_state = ShowStateStore()

app.include_router(azure.router, prefix=settings.API_PREFIX)
app.include_router(mobile.router, prefix=settings.API_PREFIX)


@app.exception_handler(InvalidRequest)
async def invalid_request_handler(request: Request, exc: InvalidRequest):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    fields = sorted({str(err["loc"][-1]) for err in exc.errors() if err.get("loc")})
    message = f"invalid request: {', '.join(fields)}" if fields else "invalid request"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"code": status.HTTP_400_BAD_REQUEST, "message": message},
    )


@app.exception_handler(UpstreamError)
async def upstream_error_handler(request: Request, exc: UpstreamError):
    """Detalhes do Azure (status, corpo) só no log; o cliente recebe mensagem genérica."""
    logger.error("Erro no Azure DevOps em %s %s: %s | body=%s", request.method, request.url.path, exc, exc.body)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestCancelled)
async def request_cancelled_handler(request: Request, exc: RequestCancelled):
    logger.info("Requisição cancelada: %s %s", request.method, request.url.path)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.get("/health")
async def health():
    """Health check para monitoramento e deploy."""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
