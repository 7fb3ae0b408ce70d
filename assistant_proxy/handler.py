"""
Точка входа для serverless (API Gateway / Netlify Functions).
"""
from typing import Optional

from mangum import Mangum

from assistant_proxy.config import Settings
from assistant_proxy.main import create_app


def build_handler(settings: Optional[Settings] = None, transport=None) -> Mangum:
    return Mangum(create_app(settings, transport), lifespan="off")


handler = build_handler()
