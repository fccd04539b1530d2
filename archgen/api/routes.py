"""
API routes — thin HTTP layer over the composers.

Routes:
  GET  /health                                  → API health check
  POST /api/architecture                        → Submit requirements, get document + diagram
  GET  /api/architecture/list                   → List submitted sessions
  GET  /api/architecture/{id}                   → Stored requirements record
  GET  /api/architecture/{id}/document          → Markdown document
  GET  /api/architecture/{id}/document/download → Markdown as attachment
  GET  /api/architecture/{id}/diagram           → Mermaid definition + rendered SVG
  GET  /api/architecture/{id}/diagram/download  → SVG as attachment
  POST /api/compose/document                    → Stateless document compose
  POST /api/compose/diagram                     → Stateless diagram compose
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse, Response
from pydantic import BaseModel

from archgen.config import get_settings
from archgen.models.schemas import RequirementsRecord
from archgen.services.diagram_composer import compose_diagram, component_summary
from archgen.services.diagram_renderer import DiagramRenderer, get_renderer
from archgen.services.document_composer import compose_document
from archgen.services.export_service import (
    ExportArtifact,
    build_diagram_export,
    build_document_export,
    content_disposition,
)

logger = logging.getLogger(__name__)

# ── Routers ──────────────────────────────────────────────
health_router = APIRouter()
architecture_router = APIRouter()
compose_router = APIRouter()

# ── In-memory session store (lost on restart) ────────────
_sessions: dict[str, dict[str, Any]] = {}


# ── Response schemas ─────────────────────────────────────
class SubmitResponse(BaseModel):
    session_id: str
    system_name: str
    document: str
    diagram: str
    components: dict[str, str]


class SessionSummary(BaseModel):
    session_id: str
    system_name: str
    created_at: str


class DiagramResponse(BaseModel):
    session_id: str
    definition: str
    components: dict[str, str]
    svg: str
    ok: bool
    error: str = ""


class ComposeDiagramResponse(BaseModel):
    definition: str
    components: dict[str, str]


# ── Helpers ──────────────────────────────────────────────

def _get_record(session_id: str) -> RequirementsRecord:
    session = _sessions.get(session_id)
    if not session:
        raise HTTPException(status_code=404, detail=f"Session {session_id} not found")
    return session["record"]


def _attachment(artifact: ExportArtifact) -> Response:
    return Response(
        content=artifact.content,
        media_type=artifact.media_type,
        headers={"Content-Disposition": content_disposition(artifact.filename)},
    )


# ── Health ───────────────────────────────────────────────

@health_router.get("/health")
async def health_check():
    settings = get_settings()
    return {
        "status": "ok",
        "app": settings.app_name,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# ── Submit ───────────────────────────────────────────────

@architecture_router.post("", response_model=SubmitResponse)
async def submit_requirements(record: RequirementsRecord):
    """
    Store the submitted record for this session and return both
    generated artifacts.  The diagram is returned as its Mermaid
    definition; rendering happens on GET /{id}/diagram.
    """
    session_id = f"ARCH-{uuid.uuid4().hex[:8].upper()}"
    _sessions[session_id] = {
        "session_id": session_id,
        "record": record,
        "created_at": datetime.now(timezone.utc).isoformat(),
    }
    logger.info(f"Received requirements for '{record.system_name}' → {session_id}")

    return SubmitResponse(
        session_id=session_id,
        system_name=record.system_name,
        document=compose_document(record),
        diagram=compose_diagram(record),
        components=component_summary(record),
    )


# ── List (declared before /{session_id} so "list" is not captured) ──

@architecture_router.get("/list", response_model=list[SessionSummary])
async def list_sessions():
    return [
        SessionSummary(
            session_id=s["session_id"],
            system_name=s["record"].system_name,
            created_at=s["created_at"],
        )
        for s in _sessions.values()
    ]


@architecture_router.get("/{session_id}", response_model=RequirementsRecord, response_model_by_alias=True)
async def get_requirements(session_id: str):
    return _get_record(session_id)


# ── Document ─────────────────────────────────────────────

@architecture_router.get("/{session_id}/document", response_class=PlainTextResponse)
async def get_document(session_id: str):
    record = _get_record(session_id)
    return PlainTextResponse(compose_document(record), media_type="text/markdown")


@architecture_router.get("/{session_id}/document/download")
async def download_document(session_id: str):
    record = _get_record(session_id)
    return _attachment(build_document_export(record))


# ── Diagram ──────────────────────────────────────────────

@architecture_router.get("/{session_id}/diagram", response_model=DiagramResponse)
async def get_diagram(session_id: str, renderer: DiagramRenderer = Depends(get_renderer)):
    record = _get_record(session_id)
    definition = compose_diagram(record)
    result = await renderer.render(definition)

    return DiagramResponse(
        session_id=session_id,
        definition=definition,
        components=component_summary(record),
        svg=result.svg,
        ok=result.ok,
        error=result.error,
    )


@architecture_router.get("/{session_id}/diagram/download")
async def download_diagram(session_id: str, renderer: DiagramRenderer = Depends(get_renderer)):
    record = _get_record(session_id)
    result = await renderer.render(compose_diagram(record))
    if not result.ok:
        raise HTTPException(status_code=502, detail="Error rendering diagram")

    return _attachment(build_diagram_export(result.svg, record))


# ── Stateless compose ────────────────────────────────────

@compose_router.post("/document", response_class=PlainTextResponse)
async def compose_document_route(record: RequirementsRecord):
    return PlainTextResponse(compose_document(record), media_type="text/markdown")


@compose_router.post("/diagram", response_model=ComposeDiagramResponse)
async def compose_diagram_route(record: RequirementsRecord):
    return ComposeDiagramResponse(
        definition=compose_diagram(record),
        components=component_summary(record),
    )
