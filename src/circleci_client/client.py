"""circleci v2 API client"""

from circleci_client._circleci import (
    InsightsAPI,
    PipelinesAPI,
    ProjectsAPI,
    WorkflowsAPI,
)


class CircleCI(ProjectsAPI, WorkflowsAPI, InsightsAPI, PipelinesAPI):
    """typed async client for https://circleci.com/api/v2

    Args:
        api_key: personal API token, sent as the `Circle-Token` header
        project_slug: default project for project-scoped methods; a
            VcsProjectSlug/RawProjectSlug, a ("github", org, repo) tuple,
            or a pre-formatted string such as "gh/org/repo"
        http_client: optional shared httpx.AsyncClient; when omitted each
            call opens its own, or one per `async with` block

    Example:
        async with CircleCI(token, ("github", "my-org", "my-repo")) as ci:
            page = await ci.list_env_vars()
            while page.next_page_token:
                page = await ci.list_env_vars(page_token=page.next_page_token)
    """
