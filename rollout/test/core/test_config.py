"""Tests for rollout.core.config module."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from rollout.core.config import (
    DEFAULT_CLUSTER,
    DeployDescriptor,
    RunEnvironment,
    load_descriptor,
)
from rollout.core.result import Err, Ok


class TestRunEnvironment:
    def test_reads_repository_and_region(self) -> None:
        result = RunEnvironment.from_environ(
            {"REPOSITORY_NAME": "acme/payments", "AWS_REGION": "eu-west-1"}
        )
        assert isinstance(result, Ok)
        assert result.value.repository_name == "acme/payments"
        assert result.value.region == "eu-west-1"

    def test_missing_repository_name(self) -> None:
        result = RunEnvironment.from_environ({"AWS_REGION": "eu-west-1"})
        assert isinstance(result, Err)
        assert result.error.kind == "env_missing"
        assert "REPOSITORY_NAME" in result.error.message

    def test_blank_repository_name_is_missing(self) -> None:
        result = RunEnvironment.from_environ({"REPOSITORY_NAME": "   "})
        assert isinstance(result, Err)

    def test_region_optional(self) -> None:
        result = RunEnvironment.from_environ({"REPOSITORY_NAME": "acme/payments"})
        assert isinstance(result, Ok)
        assert result.value.region is None
        assert result.value.cluster_env() == {}

    def test_cluster_env_sets_default_region(self) -> None:
        env = RunEnvironment(repository_name="r", region="us-east-2")
        assert env.cluster_env() == {"AWS_DEFAULT_REGION": "us-east-2"}

    def test_frozen(self) -> None:
        env = RunEnvironment(repository_name="r")
        with pytest.raises(AttributeError):
            env.region = "x"  # type: ignore[misc]


class TestLoadDescriptor:
    def test_json_with_cluster(self, tmp_path: Path) -> None:
        path = tmp_path / "production.json"
        path.write_text(
            json.dumps({"service": {"serviceName": "api", "cluster": "prod-cluster"}}),
            encoding="utf-8",
        )

        result = load_descriptor(path)

        assert isinstance(result, Ok)
        assert result.value == DeployDescriptor(path=path, service_name="api", cluster="prod-cluster")

    def test_cluster_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "staging.json"
        path.write_text(json.dumps({"service": {"serviceName": "api"}}), encoding="utf-8")

        result = load_descriptor(path)

        assert isinstance(result, Ok)
        assert result.value.cluster == DEFAULT_CLUSTER == "default"

    def test_empty_cluster_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "staging.json"
        path.write_text(
            json.dumps({"service": {"serviceName": "api", "cluster": ""}}), encoding="utf-8"
        )

        result = load_descriptor(path)

        assert isinstance(result, Ok)
        assert result.value.cluster == "default"

    def test_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "production.toml"
        path.write_text(
            '[service]\nserviceName = "worker"\ncluster = "arn:aws:ecs:eu-west-1:1:cluster/main"\n',
            encoding="utf-8",
        )

        result = load_descriptor(path)

        assert isinstance(result, Ok)
        assert result.value.service_name == "worker"
        assert result.value.cluster == "arn:aws:ecs:eu-west-1:1:cluster/main"

    def test_extra_fields_ignored(self, tmp_path: Path) -> None:
        path = tmp_path / "d.json"
        path.write_text(
            json.dumps({"service": {"serviceName": "api", "desiredCount": 3}, "task": {}}),
            encoding="utf-8",
        )
        assert isinstance(load_descriptor(path), Ok)

    def test_missing_file(self, tmp_path: Path) -> None:
        result = load_descriptor(tmp_path / "nope.json")
        assert isinstance(result, Err)
        assert result.error.kind == "descriptor_missing"

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "d.json"
        path.write_text("{not json", encoding="utf-8")

        result = load_descriptor(path)

        assert isinstance(result, Err)
        assert result.error.kind == "descriptor_invalid"

    def test_undecodable_file(self, tmp_path: Path) -> None:
        path = tmp_path / "d.json"
        path.write_bytes(b"\xff\xfe{}")

        result = load_descriptor(path)

        assert isinstance(result, Err)
        assert result.error.kind == "descriptor_invalid"
        assert "UTF-8" in result.error.message

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "d.toml"
        path.write_text("service = [", encoding="utf-8")

        result = load_descriptor(path)

        assert isinstance(result, Err)
        assert result.error.kind == "descriptor_invalid"

    def test_top_level_not_object(self, tmp_path: Path) -> None:
        path = tmp_path / "d.json"
        path.write_text("[1, 2]", encoding="utf-8")

        result = load_descriptor(path)

        assert isinstance(result, Err)
        assert "top level" in result.error.message

    def test_missing_service_section(self, tmp_path: Path) -> None:
        path = tmp_path / "d.json"
        path.write_text(json.dumps({"cluster": "x"}), encoding="utf-8")

        result = load_descriptor(path)

        assert isinstance(result, Err)
        assert "'service'" in result.error.message

    def test_missing_service_name(self, tmp_path: Path) -> None:
        path = tmp_path / "d.json"
        path.write_text(json.dumps({"service": {"cluster": "x"}}), encoding="utf-8")

        result = load_descriptor(path)

        assert isinstance(result, Err)
        assert "serviceName" in result.error.message
