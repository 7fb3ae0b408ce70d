"""
Маршрутизатор запросов прокси.

Путь сопоставляется по последнему сегменту (/api/openai-api/create-thread,
/.netlify/functions/openai-api/create-thread и /create-thread ведут в один маршрут).
Порядок обработки: OPTIONS -> проверка конфигурации -> маршрут -> метод -> поля -> вызов OpenAI.
Каждый запрос делает не больше одного исходящего вызова, повторов нет.
"""
import json
import logging
from typing import Any, Callable, Dict, NamedTuple, Optional, Tuple

from assistant_proxy.config import Settings
from assistant_proxy.errors import (
    ConfigurationError,
    MethodNotAllowedError,
    ProxyError,
    RouteNotFoundError,
    UpstreamError,
    ValidationError,
)
from assistant_proxy.schemas import ProxyRequest, ProxyResponse
from assistant_proxy.services.openai_svc import OpenAIService

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
}


class Route(NamedTuple):
    method: str
    fields: Tuple[str, ...]
    missing_message: str
    call: Callable[..., Any]


class Dispatcher:
    def __init__(self, settings: Settings, openai_service: OpenAIService):
        self.settings = settings
        self.openai_service = openai_service
        self.routes: Dict[str, Route] = {
            "create-thread": Route("POST", (), "", openai_service.create_thread),
            "add-message": Route(
                "POST", ("threadId", "content"),
                "threadId and content are required", openai_service.add_message,
            ),
            "create-run": Route("POST", ("threadId",), "threadId is required", openai_service.create_run),
            "check-run-status": Route(
                "GET", ("threadId", "runId"),
                "threadId and runId are required", openai_service.get_run,
            ),
            "get-messages": Route("GET", ("threadId",), "threadId is required", openai_service.get_messages),
        }

    def handle(self, request: ProxyRequest) -> ProxyResponse:
        method = request.method.upper()
        if method == "OPTIONS":
            return self._respond(200, "")
        try:
            self._check_configuration()
            name, route = self._resolve(request.path)
            if method != route.method:
                raise MethodNotAllowedError(route.method)
            args = self._extract(route, request)
            logger.info(f"{method} {name}")
            return self._respond(200, route.call(*args))
        except ProxyError as e:
            # ошибки OpenAI уже залогированы в OpenAIService
            if e.status_code < 500 and not isinstance(e, UpstreamError):
                logger.warning(f"Запрос {method} {request.path} отклонен ({e.status_code}): {e.error}")
            headers = {"Allow": e.allowed_method} if isinstance(e, MethodNotAllowedError) else {}
            return self._respond(e.status_code, e.payload, headers)
        except Exception:
            logger.exception(f"Необработанная ошибка при обработке {method} {request.path}")
            return self._respond(500, {"error": "Internal server error"})

    def _check_configuration(self) -> None:
        if not self.settings.openai_api_key:
            logger.error("Не задан OPENAI_API_KEY")
            raise ConfigurationError("OpenAI API key is not configured")
        if not self.settings.openai_assistant_id:
            logger.error("Не задан OPENAI_ASSISTANT_ID")
            raise ConfigurationError("OpenAI Assistant ID is not configured")

    def _resolve(self, path: str) -> Tuple[str, Route]:
        segments = [s for s in path.split("/") if s]
        name = segments[-1] if segments else ""
        route = self.routes.get(name)
        if route is None:
            raise RouteNotFoundError()
        return name, route

    def _extract(self, route: Route, request: ProxyRequest) -> list:
        if route.method == "GET":
            source = request.query
        else:
            source = self._parse_body(request.body)
        values = [source.get(field) for field in route.fields]
        if not all(values):
            raise ValidationError(route.missing_message)
        return values

    @staticmethod
    def _parse_body(raw: Optional[str]) -> Dict[str, Any]:
        if not raw or not raw.strip():
            return {}
        try:
            data = json.loads(raw)
        except ValueError:
            raise ValidationError("Request body must be valid JSON")
        return data if isinstance(data, dict) else {}

    @staticmethod
    def _respond(status_code: int, body: Any, extra_headers: Optional[Dict[str, str]] = None) -> ProxyResponse:
        headers = dict(CORS_HEADERS)
        if extra_headers:
            headers.update(extra_headers)
        return ProxyResponse(status_code=status_code, headers=headers, body=body)
