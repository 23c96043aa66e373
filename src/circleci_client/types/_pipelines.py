"""pipeline-related types"""

from typing import Literal

from circleci_client.types._common import Record


class PipelineError(Record):
    type: Literal["config", "plan"]
    message: str


class TriggerActor(Record):
    login: str
    avatar_url: str | None = None


class PipelineTrigger(Record):
    """what started the pipeline"""

    type: Literal["explicit", "api", "webhook"]
    received_at: str
    actor: TriggerActor


class VcsCommit(Record):
    subject: str
    body: str


class PipelineVcs(Record):
    """version control state the pipeline was built from"""

    provider_name: Literal["Bitbucket", "GitHub"]
    origin_repository_url: str
    target_repository_url: str
    revision: str
    branch: str | None = None
    tag: str | None = None
    commit: VcsCommit | None = None


class Pipeline(Record):
    """pipeline information"""

    id: str
    errors: list[PipelineError]
    project_slug: str
    updated_at: str | None = None
    number: int
    state: Literal["created", "errored", "pending"]
    created_at: str
    trigger: PipelineTrigger
    vcs: PipelineVcs | None = None


class PipelineConfig(Record):
    """source and compiled configuration of a pipeline"""

    source: str
    compiled: str


class PipelineCreation(Record):
    """result of triggering a pipeline"""

    id: str
    state: Literal["created", "errored", "pending"]
    number: int
    created_at: str
