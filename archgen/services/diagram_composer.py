"""
Diagram Composer — builds the Mermaid definition for the architecture
diagram and the component summary shown beneath it.

The topology is fixed: 17 nodes in 6 subgraphs, 20 edges, 5 style
classes.  Only the technology line of nodes A and C (frontend), G
(backend) and I (database) depends on the record.
"""

from __future__ import annotations

from typing import NamedTuple

from archgen.models.schemas import RequirementsRecord


class Node(NamedTuple):
    node_id: str
    title: str
    detail: str
    layer: str = ""  # when set, detail is replaced by that layer's label


# subgraph title → nodes, in render order
SUBGRAPHS: tuple[tuple[str, tuple[Node, ...]], ...] = (
    ("Client Layer", (
        Node("A", "User Interface", "", "frontend"),
        Node("B", "Mobile App", "React Native/Flutter"),
        Node("C", "Web App", "", "frontend"),
    )),
    ("API Gateway", (
        Node("D", "Load Balancer", "NGINX/HAProxy"),
        Node("E", "API Gateway", "Kong/AWS API Gateway"),
    )),
    ("Application Layer", (
        Node("F", "Authentication Service", "Auth0/JWT"),
        Node("G", "Business Logic", "", "backend"),
        Node("H", "File Storage", "AWS S3/MinIO"),
    )),
    ("Data Layer", (
        Node("I", "Primary Database", "", "database"),
        Node("J", "Cache Layer", "Redis/Memcached"),
        Node("K", "Search Engine", "Elasticsearch"),
    )),
    ("Infrastructure Layer", (
        Node("L", "Container Orchestration", "Kubernetes/Docker Swarm"),
        Node("M", "Monitoring", "Prometheus/Grafana"),
        Node("N", "Message Queue", "RabbitMQ/Apache Kafka"),
    )),
    ("External Services", (
        Node("O", "Payment Gateway", "Stripe/PayPal"),
        Node("P", "Email Service", "SendGrid/SES"),
        Node("Q", "CDN", "CloudFront/Cloudflare"),
    )),
)

DIAGRAM_NODES: tuple[Node, ...] = tuple(node for _, nodes in SUBGRAPHS for node in nodes)

DIAGRAM_EDGES: tuple[tuple[str, str], ...] = (
    ("A", "D"), ("B", "D"), ("C", "D"),
    ("D", "E"),
    ("E", "F"), ("E", "G"),
    ("G", "I"), ("G", "J"), ("G", "K"), ("G", "H"), ("G", "N"),
    ("F", "I"),
    ("L", "G"), ("L", "I"), ("L", "J"),
    ("M", "L"),
    ("G", "O"), ("G", "P"),
    ("Q", "C"), ("Q", "B"),
)

CLASS_DEFS: tuple[tuple[str, str, tuple[str, ...]], ...] = (
    ("frontend", "fill:#e1f5fe,stroke:#01579b,stroke-width:2px", ("A", "B", "C")),
    ("backend", "fill:#f3e5f5,stroke:#4a148c,stroke-width:2px", ("D", "E", "F", "G", "H")),
    ("database", "fill:#e8f5e8,stroke:#1b5e20,stroke-width:2px", ("I", "J", "K")),
    ("infrastructure", "fill:#fff3e0,stroke:#e65100,stroke-width:2px", ("L", "M", "N")),
    ("external", "fill:#fce4ec,stroke:#880e4f,stroke-width:2px", ("O", "P", "Q")),
)

# Graph node fallbacks differ from the document / summary ones
LABEL_FALLBACKS = {
    "frontend": "Frontend",
    "backend": "Backend",
    "database": "Database",
    "infrastructure": "Infrastructure",
}

SUMMARY_FALLBACKS = {
    "Frontend Layer": "Modern web framework",
    "Backend Layer": "Server-side framework",
    "Database Layer": "Database system",
    "Infrastructure": "Cloud infrastructure",
}

_INDENT = "    "


def diagram_labels(record: RequirementsRecord) -> dict[str, str]:
    """The four technology labels, with graph fallbacks applied."""
    return {
        layer: getattr(record, layer) or fallback
        for layer, fallback in LABEL_FALLBACKS.items()
    }


def compose_diagram(record: RequirementsRecord) -> str:
    """Render the Mermaid ``graph TB`` definition for ``record``."""
    labels = diagram_labels(record)
    lines = ["graph TB"]

    for title, nodes in SUBGRAPHS:
        lines.append(f'{_INDENT}subgraph "{title}"')
        for node in nodes:
            detail = labels[node.layer] if node.layer else node.detail
            lines.append(f"{_INDENT * 2}{node.node_id}[{node.title}<br/>{detail}]")
        lines.append(f"{_INDENT}end")
        lines.append("")

    lines.extend(f"{_INDENT}{src} --> {dst}" for src, dst in DIAGRAM_EDGES)
    lines.append("")

    lines.extend(f"{_INDENT}classDef {name} {style}" for name, style, _ in CLASS_DEFS)
    lines.append("")
    lines.extend(f"{_INDENT}class {','.join(members)} {name}" for name, _, members in CLASS_DEFS)

    return "\n".join(lines) + "\n"


def component_summary(record: RequirementsRecord) -> dict[str, str]:
    """Layer name → technology, as listed under the diagram."""
    values = (record.frontend, record.backend, record.database, record.infrastructure)
    return {
        layer: value or fallback
        for (layer, fallback), value in zip(SUMMARY_FALLBACKS.items(), values)
    }
