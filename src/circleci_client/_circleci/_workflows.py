"""workflow endpoints"""

from circleci_client._circleci._client import (
    BaseClient,
    HTTPMethod,
    Params,
    compact_params,
    quote_segment,
)
from circleci_client.types import Job, Page, Workflow


class WorkflowsAPI(BaseClient):
    async def get_workflow(self, workflow_id: str) -> Workflow:
        """retrieve summary fields of a workflow"""
        data = await self._request(
            HTTPMethod.GET, f"workflow/{quote_segment(workflow_id)}", 200
        )
        return Workflow.model_validate(data)

    async def cancel_workflow(self, workflow_id: str) -> None:
        """cancel a running workflow; the API accepts the request asynchronously"""
        await self._request(
            HTTPMethod.POST, f"workflow/{quote_segment(workflow_id)}/cancel", 202
        )

    async def rerun_workflow(
        self,
        workflow_id: str,
        jobs: list[str] | None = None,
        from_failed: bool = False,
    ) -> None:
        """rerun a workflow

        Args:
            workflow_id: workflow to rerun
            jobs: ids of the jobs to rerun; all jobs when omitted
            from_failed: rerun from the failed jobs only
        """
        params: Params = {}
        if jobs is not None:
            params["jobs"] = jobs
        if from_failed:
            params["from_failed"] = True

        await self._request(
            HTTPMethod.POST,
            f"workflow/{quote_segment(workflow_id)}/rerun",
            202,
            params,
        )

    async def approve_workflow_job(self, workflow_id: str, request_id: str) -> None:
        """approve a pending approval job

        Args:
            workflow_id: workflow holding the approval job
            request_id: `approval_request_id` of the job
        """
        await self._request(
            HTTPMethod.POST,
            f"workflow/{quote_segment(workflow_id)}/approve/{quote_segment(request_id)}",
            202,
        )

    async def list_workflow_jobs(
        self, workflow_id: str, page_token: str | None = None
    ) -> Page[Job]:
        """list the jobs of a workflow"""
        data = await self._request(
            HTTPMethod.GET,
            f"workflow/{quote_segment(workflow_id)}/job",
            200,
            compact_params({"page-token": page_token}),
        )
        return Page[Job].model_validate(data)
