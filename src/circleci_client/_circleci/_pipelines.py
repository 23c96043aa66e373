"""pipeline endpoints"""

from circleci_client._circleci._client import (
    BaseClient,
    HTTPMethod,
    compact_params,
    quote_segment,
)
from circleci_client.types import (
    Page,
    Pipeline,
    PipelineConfig,
    PipelineCreation,
    Workflow,
)


class PipelinesAPI(BaseClient):
    async def list_pipelines(
        self,
        org_slug: str,
        page_token: str | None = None,
        only_mine: bool = False,
    ) -> Page[Pipeline]:
        """pipelines of the most recently built projects you follow in an org

        Args:
            org_slug: organization slug (e.g., "gh/my-org")
            page_token: `next_page_token` of a previous page
            only_mine: restrict to pipelines triggered by the token's user

        Returns:
            page of pipelines
        """
        data = await self._request(
            HTTPMethod.GET,
            "pipeline",
            200,
            compact_params(
                {"org-slug": org_slug, "page-token": page_token, "mine": only_mine}
            ),
        )
        return Page[Pipeline].model_validate(data)

    async def get_pipeline(self, pipeline_id: str) -> Pipeline:
        """retrieve a pipeline by id"""
        data = await self._request(
            HTTPMethod.GET, f"pipeline/{quote_segment(pipeline_id)}", 200
        )
        return Pipeline.model_validate(data)

    async def get_pipeline_config(self, pipeline_id: str) -> PipelineConfig:
        """retrieve a pipeline's source and compiled configuration"""
        data = await self._request(
            HTTPMethod.GET, f"pipeline/{quote_segment(pipeline_id)}/config", 200
        )
        return PipelineConfig.model_validate(data)

    async def list_pipeline_workflows(
        self, pipeline_id: str, page_token: str | None = None
    ) -> Page[Workflow]:
        """list the workflows of a pipeline"""
        data = await self._request(
            HTTPMethod.GET,
            f"pipeline/{quote_segment(pipeline_id)}/workflow",
            200,
            compact_params({"page-token": page_token}),
        )
        return Page[Workflow].model_validate(data)

    async def trigger_project_pipeline(
        self,
        branch: str | None = None,
        tag: str | None = None,
        parameters: dict[str, str | int | bool] | None = None,
    ) -> PipelineCreation:
        """trigger a new pipeline on the project

        Args:
            branch: branch to build; the default branch when omitted
            tag: tag to build (mutually exclusive with branch on the server side)
            parameters: pipeline parameters

        Returns:
            id, number and state of the created pipeline
        """
        data = await self._request(
            HTTPMethod.POST,
            f"project/{self.project_slug_path()}/pipeline",
            201,
            compact_params({"branch": branch, "tag": tag, "parameters": parameters}),
        )
        return PipelineCreation.model_validate(data)

    async def list_project_pipelines(
        self, page_token: str | None = None, branch: str | None = None
    ) -> Page[Pipeline]:
        """list all pipelines of the project"""
        data = await self._request(
            HTTPMethod.GET,
            f"project/{self.project_slug_path()}/pipeline",
            200,
            compact_params({"page-token": page_token, "branch": branch}),
        )
        return Page[Pipeline].model_validate(data)

    async def list_own_project_pipelines(
        self, page_token: str | None = None
    ) -> Page[Pipeline]:
        """list the project's pipelines triggered by the token's user"""
        data = await self._request(
            HTTPMethod.GET,
            f"project/{self.project_slug_path()}/pipeline/mine",
            200,
            compact_params({"page-token": page_token}),
        )
        return Page[Pipeline].model_validate(data)

    async def get_project_pipeline(self, pipeline_number: int | str) -> Pipeline:
        """retrieve a project pipeline by its number"""
        data = await self._request(
            HTTPMethod.GET,
            f"project/{self.project_slug_path()}/pipeline/{quote_segment(str(pipeline_number))}",
            200,
        )
        return Pipeline.model_validate(data)
