"""Shared constants for docker-status."""

# Compose labels set by ``docker compose`` on every service container
COMPOSE_PROJECT_LABEL = "com.docker.compose.project"
COMPOSE_CONFIG_FILES_LABEL = "com.docker.compose.project.config_files"
COMPOSE_WORKING_DIR_LABEL = "com.docker.compose.project.working_dir"

# Seconds the daemon waits after SIGTERM before killing a stopped container
STOP_TIMEOUT = 60

# Server defaults (overridable via Settings / env vars)
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8860
DEFAULT_LOG_LEVEL = "INFO"
