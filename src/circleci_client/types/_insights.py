"""insights types: run history and summary metrics"""

from enum import Enum

from circleci_client.types._common import Record


class RunStatus(str, Enum):
    SUCCESS = "success"
    NOT_RUN = "not_run"
    FAILED = "failed"
    CANCELED = "canceled"
    UNAUTHORIZED = "unauthorized"


class WorkflowRun(Record):
    """a single recent run of a workflow"""

    id: str
    duration: int
    created_at: str
    stopped_at: str
    credits_used: int
    status: RunStatus


class JobRun(Record):
    """a single recent run of a job"""

    id: str
    started_at: str
    stopped_at: str
    status: RunStatus
    credits_used: int


class DurationMetrics(Record):
    """duration statistics in seconds"""

    min: float
    mean: float
    median: float
    p95: float
    max: float
    standard_deviation: float


class Metrics(Record):
    success_rate: float
    total_runs: int
    failed_runs: int
    successful_runs: int
    throughput: float
    mttr: float
    total_credits_used: int
    duration_metrics: DurationMetrics


class SummaryMetrics(Record):
    """aggregated metrics for a workflow or job over a time window"""

    name: str
    window_start: str
    window_end: str
    metrics: Metrics
