"""project, checkout key and environment variable endpoints"""

from circleci_client._circleci._client import (
    BaseClient,
    HTTPMethod,
    compact_params,
    quote_segment,
)
from circleci_client.types import CheckoutKey, CheckoutKeyType, EnvVar, Page, Project


class ProjectsAPI(BaseClient):
    async def get_project(self) -> Project:
        """retrieve the configured project"""
        data = await self._request(
            HTTPMethod.GET, f"project/{self.project_slug_path()}", 200
        )
        return Project.model_validate(data)

    async def list_checkout_keys(
        self, page_token: str | None = None
    ) -> Page[CheckoutKey]:
        """list checkout keys for the project

        Args:
            page_token: `next_page_token` of a previous page

        Returns:
            page of checkout keys
        """
        data = await self._request(
            HTTPMethod.GET,
            f"project/{self.project_slug_path()}/checkout-key",
            200,
            compact_params({"page-token": page_token}),
        )
        return Page[CheckoutKey].model_validate(data)

    async def create_checkout_key(
        self, key_type: CheckoutKeyType | str
    ) -> CheckoutKey:
        """create a new checkout key

        Args:
            key_type: "user-key" or "deploy-key"

        Returns:
            the created key
        """
        key_type = CheckoutKeyType(key_type)
        data = await self._request(
            HTTPMethod.POST,
            f"project/{self.project_slug_path()}/checkout-key",
            201,
            {"type": key_type.value},
        )
        return CheckoutKey.model_validate(data)

    async def get_checkout_key(self, fingerprint: str) -> CheckoutKey:
        """retrieve a single checkout key by fingerprint"""
        data = await self._request(
            HTTPMethod.GET,
            f"project/{self.project_slug_path()}/checkout-key/{quote_segment(fingerprint)}",
            200,
        )
        return CheckoutKey.model_validate(data)

    async def delete_checkout_key(self, fingerprint: str) -> None:
        """delete a checkout key by fingerprint"""
        await self._request(
            HTTPMethod.DELETE,
            f"project/{self.project_slug_path()}/checkout-key/{quote_segment(fingerprint)}",
            200,
        )

    async def list_env_vars(self, page_token: str | None = None) -> Page[EnvVar]:
        """list the project's environment variables, values masked

        Args:
            page_token: `next_page_token` of a previous page

        Returns:
            page of environment variables
        """
        data = await self._request(
            HTTPMethod.GET,
            f"project/{self.project_slug_path()}/envvar",
            200,
            compact_params({"page-token": page_token}),
        )
        return Page[EnvVar].model_validate(data)

    async def get_env_var(self, name: str) -> EnvVar:
        """retrieve the masked value of an environment variable"""
        data = await self._request(
            HTTPMethod.GET,
            f"project/{self.project_slug_path()}/envvar/{quote_segment(name)}",
            200,
        )
        return EnvVar.model_validate(data)

    async def create_env_var(self, name: str, value: str) -> EnvVar:
        """create an environment variable

        Args:
            name: variable name
            value: variable value

        Returns:
            the created variable as echoed by the API (value masked)
        """
        data = await self._request(
            HTTPMethod.POST,
            f"project/{self.project_slug_path()}/envvar",
            201,
            {"name": name, "value": value},
        )
        return EnvVar.model_validate(data)

    async def delete_env_var(self, name: str) -> None:
        """delete an environment variable by name"""
        await self._request(
            HTTPMethod.DELETE,
            f"project/{self.project_slug_path()}/envvar/{quote_segment(name)}",
            200,
        )
