"""Workload manifest models — only what the workspace needs to classify them."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .fields import ScalarText

LOAD_BALANCED_WEB_SERVICE = "Load Balanced Web Service"
BACKEND_SERVICE = "Backend Service"
SCHEDULED_JOB = "Scheduled Job"

SERVICE_TYPES: tuple[str, ...] = (LOAD_BALANCED_WEB_SERVICE, BACKEND_SERVICE)
JOB_TYPES: tuple[str, ...] = (SCHEDULED_JOB,)


class WorkloadTypeProbe(BaseModel):
    """Partial view of a workload manifest: the ``type`` discriminator only.

    Every other key in the manifest is ignored, so a manifest can carry any
    schema as long as ``type`` is a scalar; its text is what gets matched.
    """

    model_config = ConfigDict(extra="ignore")

    type: ScalarText = ""


def is_service(workload_type: str) -> bool:
    return workload_type in SERVICE_TYPES


def is_job(workload_type: str) -> bool:
    return workload_type in JOB_TYPES
