"""Custom exceptions for docker-status."""

from __future__ import annotations


class DockerStatusError(Exception):
    """Base exception for all docker-status operations."""

    def __init__(self, message: str, *, exit_code: int = 1):
        super().__init__(message)
        self.exit_code = exit_code


class DaemonError(DockerStatusError):
    """A call to the Docker daemon failed."""


class DaemonUnavailableError(DaemonError):
    """The Docker daemon could not be reached."""


class ContainerNotFoundError(DaemonError):
    """No container found matching the requested id."""
