"""Run configuration for the deployment driver.

A DriverConfig is resolved once from the environment and the command-line
flags and then passed read-only to every deployment step.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from src.cli.deployment.constants import DeploymentConstants

_CONSTANTS = DeploymentConstants()

# Field name -> (environment variables in lookup order, default)
ENV_DEFAULTS: dict[str, tuple[tuple[str, ...], str]] = {
    "registry": (("DOCKER_REG",), _CONSTANTS.DEFAULT_REGISTRY),
    "docker_usr": (("DOCKER_USR",), _CONSTANTS.DEFAULT_DOCKER_USR),
    "docker_psw": (("DOCKER_PSW",), _CONSTANTS.DEFAULT_DOCKER_PSW),
    "repository": (("DOCKER_REPO",), _CONSTANTS.DEFAULT_REPOSITORY),
    "tag": (("DOCKER_TAG",), _CONSTANTS.DEFAULT_TAG),
    "helm_repo": (("HELM_REPO", "HELM_REG"), _CONSTANTS.DEFAULT_HELM_REPO),
    "helm_usr": (("HELM_USR",), _CONSTANTS.DEFAULT_HELM_USR),
    "helm_psw": (("HELM_PSW",), _CONSTANTS.DEFAULT_HELM_PSW),
}

ACTION_FLAGS: tuple[str, ...] = ("build", "push", "pack_helm", "push_helm")


def _env_value(environ: Mapping[str, str], names: tuple[str, ...], default: str) -> str:
    """Return the first non-empty variable from ``names``, else ``default``."""
    for name in names:
        value = environ.get(name)
        if value:
            return value
    return default


@dataclass(frozen=True)
class DriverConfig:
    """Resolved settings for one deployment run.

    Attributes:
        registry: Container registry address (empty disables login)
        docker_usr: Registry username
        docker_psw: Registry password
        repository: Image repository name
        tag: Image tag
        helm_repo: Chart repository base URL
        helm_usr: Chart repository username
        helm_psw: Chart repository password
        build: Build the image
        push: Log in and push the image
        pack_helm: Package the chart
        push_helm: Upload the packaged chart
    """

    registry: str
    docker_usr: str
    docker_psw: str
    repository: str
    tag: str
    helm_repo: str
    helm_usr: str
    helm_psw: str
    build: bool = False
    push: bool = False
    pack_helm: bool = False
    push_helm: bool = False

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> DriverConfig:
        """Build a config holding only environment-derived defaults.

        Unset and empty variables both fall back to the built-in default.
        """
        values = {
            field: _env_value(environ, names, default)
            for field, (names, default) in ENV_DEFAULTS.items()
        }
        return cls(**values)

    @classmethod
    def from_options(
        cls, environ: Mapping[str, str], options: Mapping[str, Any]
    ) -> DriverConfig:
        """Resolve a config from environment defaults and parsed flag values.

        Value flags that were not given are ``None`` and keep the environment
        default; a flag given with an empty string still overrides it.

        Args:
            environ: Environment mapping (usually ``os.environ``)
            options: Parsed flag values keyed by config field name

        Returns:
            The fully resolved, immutable configuration
        """
        base = cls.from_environ(environ)
        values = {
            field: getattr(base, field) if options.get(field) is None else options[field]
            for field in ENV_DEFAULTS
        }
        values.update({flag: bool(options.get(flag)) for flag in ACTION_FLAGS})
        return cls(**values)

    @property
    def image_name(self) -> str:
        """Repository and tag, e.g. ``myapp:1.0.0``."""
        return f"{self.repository}:{self.tag}"

    @property
    def image_ref(self) -> str:
        """Full image reference including the registry when one is set."""
        if self.registry:
            return f"{self.registry}/{self.image_name}"
        return self.image_name

