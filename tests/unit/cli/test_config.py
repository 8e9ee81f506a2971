"""Tests for run configuration resolution."""

from __future__ import annotations

import dataclasses

import pytest

from src.cli.config import DriverConfig


class TestFromEnviron:
    """Environment-derived defaults."""

    def test_defaults_without_environment(self) -> None:
        config = DriverConfig.from_environ({})

        assert config.registry == "registry.hub.docker.com"
        assert config.docker_usr == "USR"
        assert config.docker_psw == "PWD"
        assert config.repository == "REPO"
        assert config.tag == "TAG"
        assert config.helm_repo == "REG"
        assert config.helm_usr == "admin"
        assert config.helm_psw == "password"
        assert not (config.build or config.push or config.pack_helm or config.push_helm)

    def test_environment_values_are_used(self) -> None:
        config = DriverConfig.from_environ(
            {
                "DOCKER_REG": "reg.example.com",
                "DOCKER_REPO": "myapp",
                "DOCKER_TAG": "v1",
                "HELM_REPO": "https://charts.example.com",
            }
        )

        assert config.registry == "reg.example.com"
        assert config.repository == "myapp"
        assert config.tag == "v1"
        assert config.helm_repo == "https://charts.example.com"

    def test_empty_variable_falls_back_to_default(self) -> None:
        config = DriverConfig.from_environ({"DOCKER_TAG": "", "DOCKER_REG": ""})

        assert config.tag == "TAG"
        assert config.registry == "registry.hub.docker.com"

    def test_legacy_helm_reg_variable(self) -> None:
        config = DriverConfig.from_environ({"HELM_REG": "https://legacy.example.com"})

        assert config.helm_repo == "https://legacy.example.com"

    def test_helm_repo_takes_precedence_over_helm_reg(self) -> None:
        config = DriverConfig.from_environ(
            {"HELM_REPO": "https://new.example.com", "HELM_REG": "https://old.example.com"}
        )

        assert config.helm_repo == "https://new.example.com"


class TestFromOptions:
    """Flag values layered over environment defaults."""

    def test_flag_overrides_environment(self) -> None:
        config = DriverConfig.from_options({"DOCKER_TAG": "v1"}, {"tag": "v2"})

        assert config.tag == "v2"

    def test_missing_flag_keeps_environment_value(self) -> None:
        config = DriverConfig.from_options({"DOCKER_TAG": "v1"}, {"tag": None})

        assert config.tag == "v1"

    def test_explicit_empty_flag_overrides(self) -> None:
        config = DriverConfig.from_options({"DOCKER_REG": "reg.example.com"}, {"registry": ""})

        assert config.registry == ""

    def test_action_flags(self) -> None:
        config = DriverConfig.from_options({}, {"build": True, "push_helm": True})

        assert config.build is True
        assert config.push is False
        assert config.pack_helm is False
        assert config.push_helm is True

    def test_unrelated_options_are_ignored(self) -> None:
        config = DriverConfig.from_options({}, {"show_help": False})

        assert config.tag == "TAG"


class TestImageReference:
    def test_image_ref_includes_registry(self) -> None:
        config = DriverConfig.from_options(
            {"DOCKER_REG": "reg.example.com", "DOCKER_REPO": "myapp"}, {"tag": "1.0.0"}
        )

        assert config.image_name == "myapp:1.0.0"
        assert config.image_ref == "reg.example.com/myapp:1.0.0"

    def test_image_ref_without_registry(self) -> None:
        config = DriverConfig.from_options({"DOCKER_REPO": "myapp"}, {"registry": ""})

        assert config.image_ref == "myapp:TAG"


def test_config_is_immutable() -> None:
    config = DriverConfig.from_environ({})

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.tag = "other"  # type: ignore[misc]
