"""Container Analysis v1 (Grafeas notes and occurrences)."""
from . import schemas
from .api import ContainerAnalysis, ProjectMethods, Scope
from .schemas import Note, Occurrence, Policy, VulnerabilityOccurrencesSummary

__all__ = [
    "schemas", "ContainerAnalysis", "ProjectMethods", "Scope",
    "Note", "Occurrence", "Policy", "VulnerabilityOccurrencesSummary",
]
