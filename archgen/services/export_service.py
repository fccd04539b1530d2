"""
Export Service — download filenames and payloads for the generated
artifacts.
"""

from __future__ import annotations

import re
from urllib.parse import quote

from pydantic import BaseModel

from archgen.models.schemas import RequirementsRecord
from archgen.services.document_composer import compose_document

_WHITESPACE = re.compile(r"\s+")
_PATH_SEPARATORS = re.compile(r"[\\/]")


class ExportArtifact(BaseModel):
    filename: str
    media_type: str
    content: str


def artifact_basename(system_name: str) -> str:
    """Replace every whitespace run in the system name with ``_``."""
    return _WHITESPACE.sub("_", system_name)


def document_filename(system_name: str) -> str:
    return f"{artifact_basename(system_name)}_Architecture.md"


def diagram_filename(system_name: str) -> str:
    return f"{artifact_basename(system_name)}_Architecture_Diagram.svg"


def definition_filename(system_name: str) -> str:
    return f"{artifact_basename(system_name)}_Architecture.mmd"


def disk_filename(filename: str) -> str:
    """Keep a download filename inside its output directory when written to disk."""
    return _PATH_SEPARATORS.sub("_", filename)


def content_disposition(filename: str) -> str:
    """
    ``attachment`` header value for any filename.

    Header values must be latin-1, so the real name travels percent-encoded
    in ``filename*`` and ``filename`` carries an ASCII fallback with quotes
    and backslashes replaced.
    """
    fallback = "".join(
        c if c.isascii() and c.isprintable() and c not in '"\\' else "_" for c in filename
    )
    encoded = quote(filename, safe="")
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{encoded}"


def build_document_export(record: RequirementsRecord) -> ExportArtifact:
    return ExportArtifact(
        filename=document_filename(record.system_name),
        media_type="text/markdown",
        content=compose_document(record),
    )


def build_diagram_export(svg: str, record: RequirementsRecord) -> ExportArtifact:
    return ExportArtifact(
        filename=diagram_filename(record.system_name),
        media_type="image/svg+xml",
        content=svg,
    )
