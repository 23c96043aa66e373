"""tests for public types API"""

import pytest
from conftest import CHECKOUT_KEY, PIPELINE, SUMMARY_METRICS, WORKFLOW, page
from pydantic import ValidationError

from circleci_client.types import (
    CheckoutKey,
    EnvVar,
    Page,
    Pipeline,
    RunStatus,
    SummaryMetrics,
    VcsProjectSlug,
    Workflow,
    WorkflowRun,
    WorkflowStatus,
)


class TestVcsProjectSlugValidation:
    """test VcsProjectSlug validation behavior"""

    def test_accepts_known_providers(self):
        for vcs in ("github", "bitbucket"):
            assert VcsProjectSlug(vcs=vcs, org="o", repo="r").vcs == vcs

    def test_rejects_unknown_provider(self):
        with pytest.raises(ValidationError):
            VcsProjectSlug(vcs="gitlab", org="o", repo="r")

    def test_rejects_slash_in_segment(self):
        with pytest.raises(ValidationError, match="invalid slug segment"):
            VcsProjectSlug(vcs="github", org="o/x", repo="r")

    def test_str_joins_parts(self):
        assert str(VcsProjectSlug(vcs="github", org="o", repo="r")) == "github/o/r"


class TestRecords:
    """test parsing of API records"""

    def test_checkout_key_hyphenated_fields(self):
        key = CheckoutKey.model_validate(CHECKOUT_KEY)
        assert key.public_key == "ssh-rsa AAAA..."
        assert key.created_at == "2024-01-01T00:00:00Z"
        assert key.model_dump(by_alias=True) == CHECKOUT_KEY

    def test_workflow_status_enum(self):
        workflow = Workflow.model_validate({**WORKFLOW, "status": "on_hold"})
        assert workflow.status is WorkflowStatus.ON_HOLD
        assert workflow.canceled_by is None

    def test_workflow_rejects_unknown_status(self):
        with pytest.raises(ValidationError):
            Workflow.model_validate({**WORKFLOW, "status": "exploded"})

    def test_missing_required_field_fails(self):
        """a body of the wrong shape is a validation error, not a silent cast"""
        with pytest.raises(ValidationError):
            EnvVar.model_validate({"name": "FOO"})

    def test_unknown_fields_are_kept(self):
        env_var = EnvVar.model_validate({"name": "FOO", "value": "xxxx", "created_at": "t"})
        assert env_var.model_extra == {"created_at": "t"}

    def test_records_are_frozen(self):
        env_var = EnvVar(name="FOO", value="xxxx")
        with pytest.raises(ValidationError):
            env_var.value = "changed"

    def test_pipeline_nested_records(self):
        pipeline = Pipeline.model_validate(PIPELINE)
        assert pipeline.trigger.actor.login == "octocat"
        assert pipeline.vcs is not None
        assert pipeline.vcs.branch == "main"
        assert pipeline.vcs.tag is None

    def test_summary_metrics(self):
        metrics = SummaryMetrics.model_validate(SUMMARY_METRICS)
        assert metrics.metrics.duration_metrics.p95 == 150
        assert metrics.metrics.success_rate == 0.9

    def test_run_status(self):
        run = WorkflowRun.model_validate(
            {
                "id": "w1",
                "duration": 1,
                "created_at": "a",
                "stopped_at": "b",
                "credits_used": 0,
                "status": "not_run",
            }
        )
        assert run.status is RunStatus.NOT_RUN


class TestPage:
    """test Page[T] parsing"""

    def test_parses_items_and_token(self):
        result = Page[EnvVar].model_validate(
            page({"name": "A", "value": "x"}, {"name": "B", "value": "y"}, next_page_token="t")
        )
        assert [v.name for v in result.items] == ["A", "B"]
        assert result.next_page_token == "t"

    def test_missing_token_means_last_page(self):
        result = Page[EnvVar].model_validate({"items": []})
        assert result.items == []
        assert result.next_page_token is None

    def test_items_validated(self):
        with pytest.raises(ValidationError):
            Page[EnvVar].model_validate({"items": [{"name": "A"}]})
