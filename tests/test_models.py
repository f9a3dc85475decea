"""Tests for domain models, routes and errors."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from adapters import routes
from core.domain.models import GroupConfig, Pipeline, RenameRequest
from core.errors import InvalidPipelineNameError, UnexpectedResponseError


class TestPipelineModel:
    def test_decodes_api_payload(self):
        pipeline = Pipeline.model_validate(
            {
                "name": "main",
                "url": "/pipelines/main",
                "paused": True,
                "groups": [{"name": "build", "jobs": ["unit", "lint"], "resources": None}],
            }
        )
        assert pipeline.name == "main"
        assert pipeline.paused is True
        assert pipeline.groups == [GroupConfig(name="build", jobs=["unit", "lint"], resources=[])]

    def test_defaults(self):
        pipeline = Pipeline.model_validate({"name": "main"})
        assert pipeline.paused is False
        assert pipeline.groups == []

    def test_is_immutable(self):
        pipeline = Pipeline(name="main")
        with pytest.raises(ValidationError):
            pipeline.paused = True

    def test_rejects_empty_name(self):
        with pytest.raises(ValidationError):
            Pipeline(name="")

    def test_dump_uses_api_field_names(self):
        group = GroupConfig(name="g", jobs=["j"], resources=["r"])
        dumped = Pipeline(name="p", paused=True, groups=[group]).model_dump(mode="json")
        assert dumped == {
            "name": "p",
            "paused": True,
            "groups": [{"name": "g", "jobs": ["j"], "resources": ["r"]}],
        }


class TestRenameRequest:
    def test_compact_json(self):
        assert RenameRequest(name="newpipelinename").model_dump_json() == '{"name":"newpipelinename"}'

    def test_empty_name_is_serialized_as_is(self):
        assert RenameRequest(name="").model_dump_json() == '{"name":""}'


class TestRoutes:
    def test_static_path(self):
        assert routes.LIST_PIPELINES.build() == "/api/v1/pipelines"

    @pytest.mark.parametrize(
        ("route", "expected"),
        [
            (routes.PAUSE_PIPELINE, "/api/v1/pipelines/p/pause"),
            (routes.UNPAUSE_PIPELINE, "/api/v1/pipelines/p/unpause"),
            (routes.GET_PIPELINE, "/api/v1/pipelines/p"),
            (routes.DELETE_PIPELINE, "/api/v1/pipelines/p"),
            (routes.RENAME_PIPELINE, "/api/v1/pipelines/p/rename"),
        ],
    )
    def test_named_paths(self, route, expected):
        assert route.build(pipeline_name="p") == expected

    def test_name_is_percent_encoded(self):
        assert routes.GET_PIPELINE.build(pipeline_name="a/b c") == "/api/v1/pipelines/a%2Fb%20c"

    def test_empty_name_is_rejected(self):
        with pytest.raises(InvalidPipelineNameError, match="pipeline_name must not be empty"):
            routes.DELETE_PIPELINE.build(pipeline_name="")


class TestErrors:
    def test_unexpected_response_message(self):
        err = UnexpectedResponseError(
            method="PUT",
            url="http://atc/api/v1/pipelines/p/rename",
            status_code=418,
            reason="I'm a teapot",
        )
        assert "418 I'm a teapot" in str(err)
        assert err.to_dict() == {
            "type": "UnexpectedResponseError",
            "message": str(err),
            "details": {
                "method": "PUT",
                "url": "http://atc/api/v1/pipelines/p/rename",
                "status_code": 418,
                "reason": "I'm a teapot",
            },
        }
