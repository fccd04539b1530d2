"""
ArchitectureGen — Main Entry Point

Compose artifacts from a requirements file (CLI):
    python -m archgen path/to/requirements.json [--out DIR] [--render]

Run as an API server (serves the form page too):
    python -m archgen --serve
    # or: uvicorn archgen.api:app --reload --port 8000

Or import and run programmatically:
    from archgen.main import run
    paths = run("path/to/requirements.json")
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from archgen.config import get_settings
from archgen.models.schemas import RequirementsRecord
from archgen.services.diagram_composer import compose_diagram, component_summary
from archgen.services.diagram_renderer import DiagramRenderer
from archgen.services.export_service import (
    build_diagram_export,
    build_document_export,
    definition_filename,
    disk_filename,
)
from archgen.utils.logger import setup_logging

logger = logging.getLogger(__name__)


def load_record(file_path: str) -> RequirementsRecord:
    """Read a JSON requirements file (camelCase or snake_case keys)."""
    if not file_path:
        raise ValueError("No requirements file path provided")
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Requirements file not found: {file_path}")

    try:
        return RequirementsRecord.model_validate(json.loads(path.read_text(encoding="utf-8")))
    except (json.JSONDecodeError, ValidationError) as e:
        raise ValueError(f"Invalid requirements file {file_path}: {e}") from e


def run(file_path: str, out_dir: str | None = None, render: bool = False) -> dict[str, str]:
    """Compose the document and diagram for ``file_path`` and write them out.

    Returns a mapping of artifact kind → written path.
    """
    record = load_record(file_path)
    target = Path(out_dir or get_settings().output_dir)
    target.mkdir(parents=True, exist_ok=True)

    written: dict[str, str] = {}

    document = build_document_export(record)
    doc_path = target / disk_filename(document.filename)
    doc_path.write_text(document.content, encoding="utf-8")
    written["document"] = str(doc_path)

    definition = compose_diagram(record)
    mmd_path = target / disk_filename(definition_filename(record.system_name))
    mmd_path.write_text(definition, encoding="utf-8")
    written["definition"] = str(mmd_path)

    if render:
        result = asyncio.run(DiagramRenderer().render(definition))
        if result.ok:
            svg = build_diagram_export(result.svg, record)
            svg_path = target / disk_filename(svg.filename)
            svg_path.write_text(svg.content, encoding="utf-8")
            written["diagram"] = str(svg_path)
        else:
            logger.warning(f"Diagram not written: {result.error}")

    _print_summary(record, written)
    return written


def _print_summary(record: RequirementsRecord, written: dict[str, str]) -> None:
    """Log a human-readable summary of what was generated."""
    logger.info("-" * 60)
    logger.info(f"  System:      {record.system_name or 'N/A'}")
    for layer, tech in component_summary(record).items():
        logger.info(f"  {layer + ':':<16} {tech}")
    for kind, path in written.items():
        logger.info(f"  {kind:<12} → {path}")
    logger.info("-" * 60)


def serve(host: str | None = None, port: int | None = None) -> None:
    """Start the FastAPI server (API + form page)."""
    import uvicorn

    settings = get_settings()
    host = host or settings.api_host
    port = port or settings.api_port
    logger.info(f"Starting API server on {host}:{port}")
    uvicorn.run("archgen.api:app", host=host, port=port, reload=settings.debug)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="archgen",
        description="Generate an architecture document and diagram from system requirements.",
    )
    parser.add_argument("requirements", nargs="?", default="", help="JSON requirements file")
    parser.add_argument("--out", default=None, help="output directory (default: settings.output_dir)")
    parser.add_argument("--render", action="store_true", help="also render the diagram to SVG")
    parser.add_argument("--serve", action="store_true", help="run the API server instead")
    return parser


def cli(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    setup_logging(get_settings().log_level)

    if args.serve:
        serve()
        return 0

    try:
        run(args.requirements, out_dir=args.out, render=args.render)
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(cli())
