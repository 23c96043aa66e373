"""circleci API client internals"""

from circleci_client._circleci._client import (
    BaseClient,
    HTTPMethod,
    Params,
    ProjectSlugLike,
    compact_params,
    encode_project_slug,
    quote_segment,
    resolve_project_slug,
)
from circleci_client._circleci._insights import InsightsAPI
from circleci_client._circleci._pipelines import PipelinesAPI
from circleci_client._circleci._projects import ProjectsAPI
from circleci_client._circleci._workflows import WorkflowsAPI

__all__ = [
    "BaseClient",
    "HTTPMethod",
    "InsightsAPI",
    "Params",
    "PipelinesAPI",
    "ProjectSlugLike",
    "ProjectsAPI",
    "WorkflowsAPI",
    "compact_params",
    "encode_project_slug",
    "quote_segment",
    "resolve_project_slug",
]
