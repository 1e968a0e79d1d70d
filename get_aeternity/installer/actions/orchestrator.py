#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Docker Compose detection and the pull/start invocation."""

from typing import List, Optional

from get_aeternity.installer.configs.constants.enums import InstallerResult
from get_aeternity.installer.utils.exceptions import MissingDependencyError, OrchestratorError
from get_aeternity.installer.utils.logger_utils import InstallerLogger

COMPOSE_PULL_SUBCOMMAND = ["pull"]
COMPOSE_UP_SUBCOMMAND = ["up", "-d"]
COMPOSE_PS_SUBCOMMAND = ["ps"]


def discover_compose_command(platform) -> Optional[List[str]]:
    """
    Return a working compose invocation list, preferring the docker compose plugin.
    """
    if platform.run_process(["docker", "compose", "version"], stderr=False).ok:
        return ["docker", "compose"]
    if platform.has_command("docker-compose"):
        return ["docker-compose"]
    return None


def check_prerequisites(platform) -> List[str]:
    """Fail fast when a required tool is missing; returns the compose command to use.

    Raises:
        MissingDependencyError: tar, docker or a compose command is unavailable
    """
    for command in ("tar", "docker"):
        if not platform.has_command(command):
            raise MissingDependencyError(command)

    compose_cmd = discover_compose_command(platform)
    if compose_cmd is None:
        raise MissingDependencyError(
            "docker compose",
            "Neither 'docker compose' nor 'docker-compose' found. Install Docker Compose and re-run.",
        )

    if not platform.tar_supports_zstd() and not platform.has_command("unzstd"):
        InstallerLogger.warning(
            "Your tar may not support zstd, and 'unzstd' is missing. Install 'zstd' package if extraction fails."
        )

    InstallerLogger.debug(f"Compose command: {' '.join(compose_cmd)}")
    return compose_cmd


def _printable(install_dir: str, command: List[str]) -> str:
    return f"(cd '{install_dir}' && {' '.join(command)})"


def start_services(config, layout, platform) -> InstallerResult:
    """Pull images then start services in the install directory, or print how to do it later.

    Raises:
        MissingDependencyError: no compose command is available
        OrchestratorError: pull or start exited non-zero
    """
    compose_cmd = discover_compose_command(platform)
    if compose_cmd is None:
        raise MissingDependencyError(
            "docker compose",
            "Neither 'docker compose' nor 'docker-compose' found. Install Docker Compose and re-run.",
        )

    InstallerLogger.info(f"Docker Compose files prepared:\n  - {layout.compose_path}\n  - {layout.env_path}")

    if not config.start_after:
        InstallerLogger.info(
            f"Skipping start. To run later: {_printable(layout.install_dir, compose_cmd + COMPOSE_UP_SUBCOMMAND)}"
        )
        return InstallerResult.SKIPPED

    if not platform.should_write_files():
        InstallerLogger.info(platform.would(f"pull images with: {_printable(layout.install_dir, compose_cmd + COMPOSE_PULL_SUBCOMMAND)}"))
        InstallerLogger.info(platform.would(f"start services with: {_printable(layout.install_dir, compose_cmd + COMPOSE_UP_SUBCOMMAND)}"))
        return InstallerResult.SKIPPED

    for action, subcommand in (("pull", COMPOSE_PULL_SUBCOMMAND), ("up", COMPOSE_UP_SUBCOMMAND)):
        InstallerLogger.info("Pulling latest images ..." if action == "pull" else "Starting services ...")
        result = platform.run_process_streaming(compose_cmd + subcommand, cwd=layout.install_dir)
        if not result.ok:
            raise OrchestratorError(action, result.returncode)

    InstallerLogger.info(f"Services started. Use: {_printable(layout.install_dir, compose_cmd + COMPOSE_PS_SUBCOMMAND)}")
    return InstallerResult.SUCCESS
