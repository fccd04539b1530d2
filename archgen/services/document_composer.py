"""
Document Composer — fills the architecture Markdown template from a
RequirementsRecord.

Pure function: the same record always yields the same bytes.  Nothing is
escaped or truncated; empty optional scalars get placeholder text and empty
list sections get a canned bullet list.  Key Features is the exception: an
empty feature list renders no bullets at all.
"""

from __future__ import annotations

from archgen.models.schemas import RequirementsRecord


# ── Placeholders for empty scalars ───────────────────────

FRONTEND_FALLBACK = "Modern web framework"
BACKEND_FALLBACK = "Server-side framework"
DATABASE_FALLBACK = "Relational/NoSQL database"
INFRASTRUCTURE_FALLBACK = "Cloud infrastructure"
STACK_TABLE_FALLBACK = "TBD"
ADDITIONAL_CONTEXT_FALLBACK = "No additional context provided."

# ── Canned bullet lists for empty list sections ──────────

SECURITY_FALLBACK = [
    "Authentication and authorization mechanisms",
    "Data encryption at rest and in transit",
    "Input validation and sanitization",
    "Regular security audits and penetration testing",
    "Compliance with industry standards (GDPR, HIPAA, etc.)",
]

INTEGRATIONS_FALLBACK = [
    "Third-party API integrations",
    "External service connections",
    "Data synchronization mechanisms",
    "Event-driven architecture for loose coupling",
]

PERFORMANCE_FALLBACK = [
    "Database connection pooling",
    "Caching at multiple layers",
    "Asynchronous processing for heavy operations",
    "Image and asset optimization",
]

CONSTRAINTS_FALLBACK = [
    "Budget considerations",
    "Legacy system compatibility",
    "Compliance requirements",
    "Performance limitations",
]

FOOTER = "*This document was generated using ArchitectureGen - System Architecture Generator*"


DOCUMENT_TEMPLATE = """\
# {system_name} - System Architecture Document

## Executive Summary

{purpose}

This document outlines the comprehensive architecture for {system_name}, designed to support {target_users} with high performance, security, and scalability requirements.

## System Overview

### Purpose
{purpose}

### Key Features
{key_features}

### Target Scale
- **Users**: {target_users}
- **Performance Requirements**: {performance_summary}

## Component Breakdown

### Frontend Layer
**Technology**: {frontend}
- User interface components
- Client-side routing and state management
- Responsive design for multiple devices
- Progressive web app capabilities

### Backend Layer
**Technology**: {backend}
- REST/GraphQL API endpoints
- Business logic implementation
- Authentication and authorization
- Data validation and processing

### Database Layer
**Technology**: {database}
- Primary data storage
- Caching layer for performance
- Database indexing strategy
- Backup and recovery mechanisms

### Infrastructure
**Technology**: {infrastructure}
- Container orchestration
- Load balancing
- Auto-scaling configuration
- Monitoring and logging

## Data Flow Description

1. **User Request**: Client applications send requests to the API gateway
2. **Authentication**: Request validation and user authentication
3. **Business Logic**: Backend services process the request
4. **Data Access**: Database operations for data retrieval/storage
5. **Response**: Formatted response returned to client

## Technology Stack Details

| Layer | Technology | Purpose |
|-------|------------|---------|
| Frontend | {frontend_cell} | User interface |
| Backend | {backend_cell} | API and business logic |
| Database | {database_cell} | Data persistence |
| Infrastructure | {infrastructure_cell} | Hosting and deployment |

## Security Considerations

{security}

## Scalability Approach

### Horizontal Scaling
- Microservices architecture for independent scaling
- Load balancers to distribute traffic
- Database sharding and read replicas
- Content delivery network (CDN) for static assets

### Vertical Scaling
- Resource monitoring and auto-scaling
- Performance optimization at code level
- Database query optimization
- Caching strategies for frequently accessed data

## Integration Points

{integrations}

## Deployment Strategy

### Containerization
- Docker containers for consistent deployment
- Kubernetes for orchestration
- CI/CD pipeline for automated deployment
- Blue-green deployment for zero-downtime updates

### Monitoring and Observability
- Application performance monitoring (APM)
- Centralized logging system
- Health checks and alerting
- Performance metrics and dashboards

## Performance Optimization Strategies

{performance}

## Backup and Disaster Recovery

- Automated daily backups
- Point-in-time recovery capabilities
- Multi-region deployment for high availability
- Disaster recovery testing procedures

## Technical Constraints

{constraints}

## Additional Context

{additional_context}

---

{footer}
"""


def bullet_list(entries: list[str], prefix: str = "") -> str:
    """One ``- `` line per entry, in order.  Empty input gives ``""``."""
    return "\n".join(f"- {prefix}{entry}" for entry in entries)


def _bullets_or_fallback(entries: list[str], fallback: list[str], prefix: str = "") -> str:
    if entries:
        return bullet_list(entries, prefix)
    return bullet_list(fallback)


def compose_document(record: RequirementsRecord) -> str:
    """Render the full architecture document for ``record`` as Markdown."""
    return DOCUMENT_TEMPLATE.format(
        system_name=record.system_name,
        purpose=record.purpose,
        target_users=record.target_users,
        key_features=bullet_list(record.main_features),
        performance_summary=", ".join(record.performance_requirements),
        frontend=record.frontend or FRONTEND_FALLBACK,
        backend=record.backend or BACKEND_FALLBACK,
        database=record.database or DATABASE_FALLBACK,
        infrastructure=record.infrastructure or INFRASTRUCTURE_FALLBACK,
        frontend_cell=record.frontend or STACK_TABLE_FALLBACK,
        backend_cell=record.backend or STACK_TABLE_FALLBACK,
        database_cell=record.database or STACK_TABLE_FALLBACK,
        infrastructure_cell=record.infrastructure or STACK_TABLE_FALLBACK,
        security=_bullets_or_fallback(record.security_requirements, SECURITY_FALLBACK),
        integrations=_bullets_or_fallback(record.integrations, INTEGRATIONS_FALLBACK),
        performance=_bullets_or_fallback(
            record.performance_requirements, PERFORMANCE_FALLBACK, prefix="Target: "
        ),
        constraints=_bullets_or_fallback(record.technical_constraints, CONSTRAINTS_FALLBACK),
        additional_context=record.additional_context or ADDITIONAL_CONTEXT_FALLBACK,
        footer=FOOTER,
    )
