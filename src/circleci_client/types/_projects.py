"""project, checkout key and environment variable types"""

from enum import Enum
from typing import Literal

from pydantic import Field

from circleci_client.types._common import Record


class VcsInfo(Record):
    """version control details of a project"""

    vcs_url: str
    default_branch: str
    provider: Literal["Bitbucket", "GitHub"]


class Project(Record):
    """project information"""

    slug: str
    organization_name: str
    name: str
    vcs_info: VcsInfo


class CheckoutKeyType(str, Enum):
    """kind of checkout key to create"""

    USER_KEY = "user-key"
    DEPLOY_KEY = "deploy-key"


class CheckoutKey(Record):
    """checkout key information"""

    public_key: str = Field(alias="public-key")
    type: Literal["deploy-key", "github-user-key"]
    fingerprint: str
    preferred: bool
    created_at: str = Field(alias="created-at")


class EnvVar(Record):
    """environment variable; listings return the value masked"""

    name: str
    value: str
