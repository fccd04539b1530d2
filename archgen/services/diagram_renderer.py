"""
Diagram Renderer — turns a Mermaid definition into SVG by calling a
Kroki-compatible rendering service.

The call is the only awaited step in the request path.  Any transport or
HTTP failure is logged and replaced by a static error placeholder; there
are no retries.
"""

from __future__ import annotations

import json
import logging

import httpx
from pydantic import BaseModel

from archgen.config import get_settings

logger = logging.getLogger(__name__)

ERROR_PLACEHOLDER = '<div class="text-red-500">Error rendering diagram</div>'

MERMAID_INIT = {
    "theme": "default",
    "themeVariables": {
        "primaryColor": "#3b82f6",
        "primaryTextColor": "#1e293b",
        "primaryBorderColor": "#1e40af",
        "lineColor": "#64748b",
        "secondaryColor": "#f1f5f9",
        "tertiaryColor": "#e2e8f0",
    },
}


class RenderResult(BaseModel):
    ok: bool
    svg: str
    error: str = ""


def with_theme(definition: str) -> str:
    """Prefix ``definition`` with the Mermaid init directive carrying the theme."""
    return f"%%{{init: {json.dumps(MERMAID_INIT)}}}%%\n{definition}"


class DiagramRenderer:
    """Async client for ``POST {base_url}/mermaid/svg``."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        settings = get_settings()
        self.base_url = (base_url or settings.diagram_renderer_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.diagram_render_timeout
        self._transport = transport

    async def render(self, definition: str) -> RenderResult:
        url = f"{self.base_url}/mermaid/svg"
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(
                    url,
                    content=with_theme(definition).encode("utf-8"),
                    headers={"Content-Type": "text/plain"},
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            return self._failed(f"Renderer returned {exc.response.status_code}")
        except httpx.HTTPError as exc:
            return self._failed(f"Failed to contact renderer: {exc!r}")

        svg = response.text
        if "<svg" not in svg:
            return self._failed("Renderer reply is not an SVG document")

        logger.debug(f"Rendered diagram ({len(svg)} bytes) via {url}")
        return RenderResult(ok=True, svg=svg)

    @staticmethod
    def _failed(reason: str) -> RenderResult:
        logger.error(f"Error rendering diagram: {reason}")
        return RenderResult(ok=False, svg=ERROR_PLACEHOLDER, error=reason)


def get_renderer() -> DiagramRenderer:
    """Dependency hook for the API routes."""
    return DiagramRenderer()
