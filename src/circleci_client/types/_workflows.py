"""workflow and job types"""

from enum import Enum

from circleci_client.types._common import Record


class WorkflowStatus(str, Enum):
    SUCCESS = "success"
    RUNNING = "running"
    NOT_RUN = "not_run"
    FAILED = "failed"
    ERROR = "error"
    FAILING = "failing"
    ON_HOLD = "on_hold"
    CANCELED = "canceled"
    UNAUTHORIZED = "unauthorized"


class JobType(str, Enum):
    BUILD = "build"
    APPROVAL = "approval"


class Workflow(Record):
    """workflow summary"""

    pipeline_id: str
    canceled_by: str | None = None
    id: str
    name: str
    project_slug: str
    errored_by: str | None = None
    status: WorkflowStatus
    started_by: str
    pipeline_number: int
    created_at: str
    stopped_at: str | None = None


class Job(Record):
    """job within a workflow"""

    canceled_by: str | None = None
    dependencies: list[str]
    job_number: int | None = None
    id: str
    started_at: str | None = None
    name: str
    approved_by: str | None = None
    project_slug: str
    status: str
    type: JobType
    stopped_at: str | None = None
    approval_request_id: str | None = None
