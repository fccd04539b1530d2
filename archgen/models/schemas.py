"""
Data schemas shared by the composers, the API and the CLI.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


LIST_FIELDS = (
    "main_features",
    "technical_constraints",
    "preferences",
    "performance_requirements",
    "security_requirements",
    "integrations",
)


class RequirementsRecord(BaseModel):
    """
    Everything the user typed into the requirements form.

    JSON keys are camelCase (``systemName``) as sent by the browser form;
    snake_case names are accepted too.  List entries that are blank after
    stripping are dropped on construction, kept entries stay verbatim.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    # Basic information
    system_name: str = ""
    purpose: str = ""
    main_features: list[str] = []

    # Technical constraints
    technical_constraints: list[str] = []
    preferences: list[str] = []

    # Scale and performance
    target_users: str = ""
    performance_requirements: list[str] = []

    # Technology stack
    frontend: str = ""
    backend: str = ""
    database: str = ""
    infrastructure: str = ""

    # Security / integrations
    security_requirements: list[str] = []
    integrations: list[str] = []

    additional_context: str = ""

    @field_validator(*LIST_FIELDS)
    @classmethod
    def _drop_blank_entries(cls, value: list[str]) -> list[str]:
        # str.strip() keeps U+FEFF, which browser trim() removes
        return [entry for entry in value if entry.replace("\ufeff", " ").strip()]
