"""public types API for the circleci client"""

from circleci_client.types._common import (
    Page,
    ProjectSlug,
    RawProjectSlug,
    Record,
    VcsProjectSlug,
    VcsProvider,
)
from circleci_client.types._insights import (
    DurationMetrics,
    JobRun,
    Metrics,
    RunStatus,
    SummaryMetrics,
    WorkflowRun,
)
from circleci_client.types._pipelines import (
    Pipeline,
    PipelineConfig,
    PipelineCreation,
    PipelineError,
    PipelineTrigger,
    PipelineVcs,
    TriggerActor,
    VcsCommit,
)
from circleci_client.types._projects import (
    CheckoutKey,
    CheckoutKeyType,
    EnvVar,
    Project,
    VcsInfo,
)
from circleci_client.types._workflows import Job, JobType, Workflow, WorkflowStatus

__all__ = [
    "CheckoutKey",
    "CheckoutKeyType",
    "DurationMetrics",
    "EnvVar",
    "Job",
    "JobRun",
    "JobType",
    "Metrics",
    "Page",
    "Pipeline",
    "PipelineConfig",
    "PipelineCreation",
    "PipelineError",
    "PipelineTrigger",
    "PipelineVcs",
    "Project",
    "ProjectSlug",
    "RawProjectSlug",
    "Record",
    "RunStatus",
    "SummaryMetrics",
    "TriggerActor",
    "VcsCommit",
    "VcsInfo",
    "VcsProjectSlug",
    "VcsProvider",
    "Workflow",
    "WorkflowRun",
    "WorkflowStatus",
]
