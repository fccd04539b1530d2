"""ArchitectureGen — system architecture documents and diagrams from requirements."""

__version__ = "0.1.0"
