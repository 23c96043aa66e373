"""insights endpoints: summary metrics and recent runs"""

from datetime import datetime

from circleci_client._circleci._client import (
    BaseClient,
    HTTPMethod,
    compact_params,
    quote_segment,
)
from circleci_client.types import JobRun, Page, SummaryMetrics, WorkflowRun


class InsightsAPI(BaseClient):
    async def list_workflow_metrics(
        self, page_token: str | None = None, branch: str | None = None
    ) -> Page[SummaryMetrics]:
        """summary metrics for the project's workflows

        Args:
            page_token: `next_page_token` of a previous page
            branch: only consider runs on this branch

        Returns:
            page of per-workflow summary metrics
        """
        data = await self._request(
            HTTPMethod.GET,
            f"insights/{self.project_slug_path()}/workflows",
            200,
            compact_params({"page-token": page_token, "branch": branch}),
        )
        return Page[SummaryMetrics].model_validate(data)

    async def list_workflow_job_metrics(
        self,
        workflow_name: str,
        page_token: str | None = None,
        branch: str | None = None,
    ) -> Page[SummaryMetrics]:
        """summary metrics for the jobs of one workflow"""
        data = await self._request(
            HTTPMethod.GET,
            f"insights/{self.project_slug_path()}/workflows/{quote_segment(workflow_name)}/jobs",
            200,
            compact_params({"page-token": page_token, "branch": branch}),
        )
        return Page[SummaryMetrics].model_validate(data)

    async def list_workflow_runs(
        self,
        workflow_name: str,
        page_token: str | None = None,
        branch: str | None = None,
        start_date: str | datetime | None = None,
        end_date: str | datetime | None = None,
    ) -> Page[WorkflowRun]:
        """recent runs of a workflow

        Args:
            workflow_name: name of the workflow
            page_token: `next_page_token` of a previous page
            branch: only runs on this branch
            start_date: only runs started at or after this time
            end_date: only runs started at or before this time

        Returns:
            page of workflow runs
        """
        data = await self._request(
            HTTPMethod.GET,
            f"insights/{self.project_slug_path()}/workflows/{quote_segment(workflow_name)}",
            200,
            compact_params(
                {
                    "page-token": page_token,
                    "branch": branch,
                    "start-date": start_date,
                    "end-date": end_date,
                }
            ),
        )
        return Page[WorkflowRun].model_validate(data)

    async def list_workflow_job_runs(
        self,
        workflow_name: str,
        job_name: str,
        page_token: str | None = None,
        branch: str | None = None,
        start_date: str | datetime | None = None,
        end_date: str | datetime | None = None,
    ) -> Page[JobRun]:
        """recent runs of a job within a workflow

        same filters as `list_workflow_runs`
        """
        workflow = quote_segment(workflow_name)
        job = quote_segment(job_name)
        data = await self._request(
            HTTPMethod.GET,
            f"insights/{self.project_slug_path()}/workflows/{workflow}/jobs/{job}",
            200,
            compact_params(
                {
                    "page-token": page_token,
                    "branch": branch,
                    "start-date": start_date,
                    "end-date": end_date,
                }
            ),
        )
        return Page[JobRun].model_validate(data)
