"""
API роутер прокси: один маршрут на любой путь, вся маршрутизация в Dispatcher.
"""
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response
from starlette.concurrency import run_in_threadpool

from assistant_proxy.schemas import ProxyRequest, ProxyResponse
from assistant_proxy.services.dispatcher import Dispatcher

router = APIRouter(tags=["openai-proxy"])

METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


# Зависимость для получения диспетчера
def get_dispatcher(request: Request) -> Dispatcher:
    return request.app.state.dispatcher


def to_response(result: ProxyResponse) -> Response:
    if result.body == "":
        return Response(status_code=result.status_code, headers=result.headers)
    return JSONResponse(result.body, status_code=result.status_code, headers=result.headers)


@router.api_route("/{full_path:path}", methods=METHODS, include_in_schema=False)
async def proxy(request: Request, full_path: str, dispatcher: Dispatcher = Depends(get_dispatcher)):
    """
    Перенаправление запроса в OpenAI.
    """
    raw = await request.body()
    proxy_request = ProxyRequest(
        method=request.method,
        path=request.url.path,
        query=dict(request.query_params),
        body=raw.decode("utf-8", errors="replace") if raw else None,
    )
    # исходящий вызов блокирующий
    result = await run_in_threadpool(dispatcher.handle, proxy_request)
    return to_response(result)
