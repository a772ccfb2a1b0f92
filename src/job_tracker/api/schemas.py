from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models import JobStatus


class WithRequestId(BaseModel):
    request_id: Optional[str] = None


class JobResponse(WithRequestId):
    model_config = ConfigDict(populate_by_name=True)

    job_id: str = Field(alias="jobId")
    status: JobStatus


class JobTimeoutResponse(WithRequestId):
    model_config = ConfigDict(populate_by_name=True)

    job_id: str = Field(alias="jobId")
    timeout: int


class GlobalTimeoutResponse(WithRequestId):
    timeout: int


class GlobalTimeoutUpdated(GlobalTimeoutResponse):
    message: str = "Global timeout updated successfully"
