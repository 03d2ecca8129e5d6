"""Compose metadata read from container labels."""

from __future__ import annotations

from collections.abc import Mapping

from docker_status.constants import (
    COMPOSE_CONFIG_FILES_LABEL,
    COMPOSE_PROJECT_LABEL,
    COMPOSE_WORKING_DIR_LABEL,
)
from docker_status.models import RawContainer


def label_value(labels: Mapping[str, str], key: str) -> str | None:
    """Return the label value, or None when it is missing or empty."""
    value = labels.get(key)
    return value or None


def project_name(container: RawContainer) -> str | None:
    return label_value(container.labels, COMPOSE_PROJECT_LABEL)


def config_file(container: RawContainer) -> str | None:
    return label_value(container.labels, COMPOSE_CONFIG_FILES_LABEL)


def config_dir(container: RawContainer) -> str | None:
    return label_value(container.labels, COMPOSE_WORKING_DIR_LABEL)
