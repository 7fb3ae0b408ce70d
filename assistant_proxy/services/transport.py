"""
HTTP-клиент для исходящих запросов к OpenAI.
Любой объект с методом send(method, url, headers, body) можно подставить вместо RequestsTransport.
"""
import logging
from typing import Any, Dict, Optional

import requests

from assistant_proxy.schemas import TransportResponse

logger = logging.getLogger(__name__)


class RequestsTransport:
    """Транспорт на requests.Session."""
    def __init__(self, timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        self.timeout = timeout
        self.session = session or requests.Session()

    def send(self, method: str, url: str, headers: Dict[str, str], body: Any = None) -> TransportResponse:
        kwargs = {"headers": headers}
        if body is not None:
            kwargs["json"] = body
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        response = self.session.request(method, url, **kwargs)
        try:
            payload = response.json()
        except ValueError:
            payload = response.text
        logger.debug(f"{method} {url} -> {response.status_code}")
        return TransportResponse(status_code=response.status_code, body=payload)

    def close(self) -> None:
        self.session.close()
