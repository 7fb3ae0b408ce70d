"""
Схемы данных для прокси к OpenAI.
"""
from pydantic import BaseModel, Field
from typing import Any, Dict, Optional


class ProxyRequest(BaseModel):
    method: str
    path: str
    query: Dict[str, str] = Field(default_factory=dict)
    body: Optional[str] = None


class ProxyResponse(BaseModel):
    status_code: int
    headers: Dict[str, str] = Field(default_factory=dict)
    body: Any = None


class TransportResponse(BaseModel):
    status_code: int
    body: Any = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300
