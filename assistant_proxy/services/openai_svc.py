"""
Сервис для работы с OpenAI Assistants API.
"""
import logging
from typing import Any, Dict, Optional
from urllib.parse import quote, urlencode

import requests

from assistant_proxy.config import Settings
from assistant_proxy.errors import UpstreamError

logger = logging.getLogger(__name__)


def _segment(value: str) -> str:
    return quote(str(value), safe="")


class OpenAIService:
    """Класс для работы с OpenAI API. Один метод = один HTTP-запрос."""
    def __init__(self, settings: Settings, transport):
        self.settings = settings
        self.transport = transport

    def _headers(self, with_body: bool) -> Dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self.settings.openai_api_key}",
            "OpenAI-Beta": self.settings.openai_beta,
        }
        if with_body:
            headers["Content-Type"] = "application/json"
        if self.settings.openai_org_id:
            headers["OpenAI-Organization"] = self.settings.openai_org_id
        return headers

    def _call(self, method: str, path: str, body: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.settings.openai_base_url}{path}"
        try:
            response = self.transport.send(method, url, self._headers(body is not None), body)
        except requests.RequestException as e:
            logger.error(f"Ошибка соединения с OpenAI ({method} {path}): {e}")
            raise UpstreamError(str(e)) from e
        if not response.ok:
            logger.error(f"OpenAI вернул {response.status_code} на {method} {path}: {response.body}")
            raise UpstreamError(response.body, status_code=response.status_code)
        return response.body

    def create_thread(self) -> Any:
        return self._call("POST", "/threads", {})

    def add_message(self, thread_id: str, content: str) -> Any:
        return self._call(
            "POST",
            f"/threads/{_segment(thread_id)}/messages",
            {"role": "user", "content": content},
        )

    def create_run(self, thread_id: str) -> Any:
        return self._call(
            "POST",
            f"/threads/{_segment(thread_id)}/runs",
            {"assistant_id": self.settings.openai_assistant_id},
        )

    def get_run(self, thread_id: str, run_id: str) -> Any:
        return self._call("GET", f"/threads/{_segment(thread_id)}/runs/{_segment(run_id)}")

    def get_messages(self, thread_id: str) -> Any:
        query = urlencode({"limit": self.settings.messages_limit})
        return self._call("GET", f"/threads/{_segment(thread_id)}/messages?{query}")
