"""
Tests: Diagram Composer — fixed topology, four variable labels.

Run with:
    pytest archgen/tests/test_diagram_composer.py -v
"""

import re

from archgen.models.schemas import RequirementsRecord
from archgen.services.diagram_composer import (
    CLASS_DEFS,
    DIAGRAM_EDGES,
    DIAGRAM_NODES,
    compose_diagram,
    component_summary,
)

EDGE = re.compile(r"^ +(\w) --> (\w)$", re.MULTILINE)
NODE = re.compile(r"^ +(\w)\[(.+?)<br/>(.*)\]$", re.MULTILINE)


def _topology(definition: str):
    return EDGE.findall(definition), [m[0] for m in NODE.findall(definition)]


class TestTopology:
    def test_counts(self):
        assert len(DIAGRAM_NODES) == 17
        assert len(DIAGRAM_EDGES) == 20
        assert len(CLASS_DEFS) == 5

    def test_definition_shape(self):
        definition = compose_diagram(RequirementsRecord())
        assert definition.startswith("graph TB\n")
        assert definition.count('subgraph "') == 6
        assert definition.count("classDef ") == 5
        edges, nodes = _topology(definition)
        assert len(edges) == 20
        assert nodes == [n.node_id for n in DIAGRAM_NODES]

    def test_topology_independent_of_input(self):
        plain = compose_diagram(RequirementsRecord())
        busy = compose_diagram(RequirementsRecord(
            frontend="Vue", backend="Django", database="MySQL", infrastructure="GCP",
            mainFeatures=["a", "b"], integrations=["Stripe"],
        ))
        assert _topology(plain) == _topology(busy)

    def test_only_four_positions_vary(self):
        plain = compose_diagram(RequirementsRecord()).split("\n")
        busy = compose_diagram(RequirementsRecord(
            frontend="Vue", backend="Django", database="MySQL", infrastructure="GCP",
        )).split("\n")
        assert len(plain) == len(busy)
        changed = [b.strip() for a, b in zip(plain, busy) if a != b]
        assert changed == [
            "A[User Interface<br/>Vue]",
            "C[Web App<br/>Vue]",
            "G[Business Logic<br/>Django]",
            "I[Primary Database<br/>MySQL]",
        ]


class TestLabels:
    def test_fallback_labels(self):
        definition = compose_diagram(RequirementsRecord())
        assert "A[User Interface<br/>Frontend]" in definition
        assert "G[Business Logic<br/>Backend]" in definition
        assert "I[Primary Database<br/>Database]" in definition

    def test_static_nodes_untouched(self):
        definition = compose_diagram(RequirementsRecord(backend="Go"))
        assert "L[Container Orchestration<br/>Kubernetes/Docker Swarm]" in definition
        assert "class I,J,K database" in definition

    def test_deterministic(self):
        record = RequirementsRecord(frontend="React")
        assert compose_diagram(record) == compose_diagram(record)


class TestComponentSummary:
    def test_fallbacks(self):
        assert component_summary(RequirementsRecord()) == {
            "Frontend Layer": "Modern web framework",
            "Backend Layer": "Server-side framework",
            "Database Layer": "Database system",
            "Infrastructure": "Cloud infrastructure",
        }

    def test_values(self):
        summary = component_summary(RequirementsRecord(backend="Go", infrastructure="AWS"))
        assert summary["Backend Layer"] == "Go"
        assert summary["Infrastructure"] == "AWS"
        assert summary["Frontend Layer"] == "Modern web framework"
