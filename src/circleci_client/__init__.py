"""typed client for the circleci v2 API"""

from circleci_client.client import CircleCI
from circleci_client.exceptions import APIError, CircleCIError, ProjectSlugError

try:
    from importlib.metadata import version

    __version__ = version("circleci-client")
except Exception:
    __version__ = "0.0.0"

__all__ = ["APIError", "CircleCI", "CircleCIError", "ProjectSlugError"]
