"""shared types and validators"""

from typing import Annotated, Generic, Literal, TypeVar

from pydantic import AfterValidator, BaseModel, ConfigDict

T = TypeVar("T")

VcsProvider = Literal["github", "bitbucket"]


def _require_segment(v: str) -> str:
    """reject empty or slash-containing slug segments"""
    if not v or "/" in v:
        raise ValueError(f"invalid slug segment: '{v}'")
    return v


SlugSegment = Annotated[str, AfterValidator(_require_segment)]


class Record(BaseModel):
    """read-only snapshot of a remote resource

    fields the server adds beyond the declared ones are kept as extras
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)


class Page(Record, Generic[T]):
    """one page of a paginated listing

    `next_page_token` is opaque; pass it back unchanged to get the next page.
    None means there are no more results.
    """

    items: list[T]
    next_page_token: str | None = None


class VcsProjectSlug(BaseModel):
    """project reference built from its three parts"""

    model_config = ConfigDict(frozen=True)

    vcs: VcsProvider
    org: SlugSegment
    repo: SlugSegment

    def __str__(self) -> str:
        return f"{self.vcs}/{self.org}/{self.repo}"


class RawProjectSlug(BaseModel):
    """project reference given as an already formatted string"""

    model_config = ConfigDict(frozen=True)

    value: str

    def __str__(self) -> str:
        return self.value


ProjectSlug = VcsProjectSlug | RawProjectSlug
