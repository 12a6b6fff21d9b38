"""keel data models — re-export all models for convenient imports."""

from .summary import Summary
from .workload import JOB_TYPES, SERVICE_TYPES, WorkloadTypeProbe, is_job, is_service

__all__ = [
    "JOB_TYPES",
    "SERVICE_TYPES",
    "Summary",
    "WorkloadTypeProbe",
    "is_job",
    "is_service",
]
