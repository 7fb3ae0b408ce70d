"""
Ошибки прокси. Каждая ошибка знает свой HTTP-статус и тело ответа {"error": ...}.
"""
from typing import Any, Dict, Optional


class ProxyError(Exception):
    status_code = 500

    def __init__(self, error: Any, status_code: Optional[int] = None):
        super().__init__(error if isinstance(error, str) else repr(error))
        self.error = error
        if status_code is not None:
            self.status_code = status_code

    @property
    def payload(self) -> Dict[str, Any]:
        return {"error": self.error}


class ConfigurationError(ProxyError):
    """Не задан ключ API или идентификатор ассистента."""
    status_code = 500


class ValidationError(ProxyError):
    """Не хватает обязательных полей или тело запроса не JSON."""
    status_code = 400


class MethodNotAllowedError(ProxyError):
    status_code = 405

    def __init__(self, allowed_method: str):
        super().__init__("Method not allowed")
        self.allowed_method = allowed_method


class RouteNotFoundError(ProxyError):
    status_code = 404

    def __init__(self):
        super().__init__("Not found")


class UpstreamError(ProxyError):
    """
    Ошибка вызова OpenAI. status_code берется из ответа OpenAI,
    если ответа не было вовсе, остается 500.
    """
    status_code = 500
