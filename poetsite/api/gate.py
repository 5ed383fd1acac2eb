"""Middleware applying the route gate before any route runs."""

import logging

from fastapi import Request
from fastapi.responses import RedirectResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from poetsite.core.auth_config import AuthConfig
from poetsite.services.route_gate import evaluate_gate, is_gated
from poetsite.services.session import read_session_claim

logger = logging.getLogger(__name__)


class RouteGateMiddleware(BaseHTTPMiddleware):
    """Redirects gated paths based on the signed session claim alone (no store access)."""

    def __init__(self, app: ASGIApp, auth_config: AuthConfig) -> None:
        super().__init__(app)
        self.auth_config = auth_config

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        if not is_gated(path, self.auth_config):
            return await call_next(request)
        claim = read_session_claim(
            request.cookies.get(self.auth_config.cookie_name), self.auth_config
        )
        decision = evaluate_gate(path, claim, self.auth_config)
        if not decision.allowed:
            logger.debug("Gate redirect %s -> %s", path, decision.redirect_to)
            return RedirectResponse(url=decision.redirect_to, status_code=307)
        return await call_next(request)
