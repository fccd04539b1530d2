"""Services — DocumentComposer, DiagramComposer, DiagramRenderer, ExportService."""

from archgen.services.document_composer import compose_document
from archgen.services.diagram_composer import compose_diagram, component_summary
from archgen.services.diagram_renderer import DiagramRenderer, RenderResult
from archgen.services.export_service import ExportArtifact

__all__ = [
    "compose_document",
    "compose_diagram",
    "component_summary",
    "DiagramRenderer",
    "RenderResult",
    "ExportArtifact",
]
