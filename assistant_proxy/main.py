"""
Основной файл прокси к OpenAI Assistants API.
"""
import logging
from typing import Optional

from fastapi import FastAPI

from assistant_proxy.config import Settings
from assistant_proxy.routers import proxy
from assistant_proxy.services.dispatcher import Dispatcher
from assistant_proxy.services.openai_svc import OpenAIService
from assistant_proxy.services.transport import RequestsTransport

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app(settings: Optional[Settings] = None, transport=None) -> FastAPI:
    """
    Собирает приложение. Настройки читаются из окружения один раз, здесь.
    transport можно подменить (тесты), по умолчанию RequestsTransport.
    """
    if settings is None:
        settings = Settings()
    configure_logging(settings.log_level)
    if transport is None:
        transport = RequestsTransport(timeout=settings.request_timeout)

    app = FastAPI(
        title="OpenAI Assistants Proxy",
        description="Прокси к OpenAI Assistants API для браузерного клиента",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.dispatcher = Dispatcher(settings, OpenAIService(settings, transport))
    app.include_router(proxy.router)

    @app.on_event("shutdown")
    async def shutdown_event():
        close = getattr(transport, "close", None)
        if close is not None:
            close()
        logger.info("Прокси остановлен")

    if not settings.openai_api_key:
        logger.warning("OPENAI_API_KEY не задан, все запросы кроме OPTIONS получат 500")
    logger.info(f"Прокси запущен, OpenAI: {settings.openai_base_url}")
    return app


if __name__ == "__main__":
    import uvicorn
    settings = Settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)
