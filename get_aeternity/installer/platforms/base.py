#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Base installer class for platform-specific installers."""

import abc
import subprocess
from dataclasses import dataclass, field
from typing import List, Optional

from get_aeternity.aeternity_utils import which
from get_aeternity.installer.configs.constants.enums import (
    ArchiveKind,
    ControlFlow,
    InstallerResult,
    InstallPhase,
)
from get_aeternity.installer.utils.exceptions import InstallerError
from get_aeternity.installer.utils.logger_utils import InstallerLogger, SkipReasons


@dataclass(frozen=True)
class ProcessResult:
    """Exit status and captured output of an external command."""

    returncode: int
    output: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class BaseInstaller(abc.ABC):
    """Abstract base class for platform-specific installers."""

    def __init__(self, debug: bool = False, control_flow: Optional[ControlFlow] = None):
        """Initialize the base installer.

        Args:
            debug: Enable debug output
            control_flow: INSTALL performs every step; DRYRUN only logs what would happen
        """
        self.debug = debug
        self.control_flow: ControlFlow = control_flow or ControlFlow.INSTALL

    def is_dry_run(self) -> bool:
        return self.control_flow.is_dry_run()

    def should_write_files(self) -> bool:
        return self.control_flow.should_write_files()

    def would(self, action: str) -> str:
        return self.control_flow.would(action)

    @abc.abstractmethod
    def tar_supports_zstd(self) -> bool:
        """Return True if the system tar can decompress zstd natively."""
        pass

    def has_command(self, command: str) -> bool:
        return which(command, debug=self.debug)

    def run_process(
        self,
        command: List[str],
        cwd: Optional[str] = None,
        stderr: bool = True,
    ) -> ProcessResult:
        """Run a system process and capture its output."""
        try:
            process = subprocess.run(
                command,
                cwd=cwd,
                capture_output=True,
                check=False,
                text=True,
                errors="ignore",
            )
            output = process.stdout.splitlines() if process.stdout else []
            if stderr and process.stderr:
                output.extend(process.stderr.splitlines())
            result = ProcessResult(process.returncode, output)
        except FileNotFoundError:
            result = ProcessResult(127, [f"Command {' '.join(command)} not found or unable to execute"])
        except OSError as e:
            result = ProcessResult(1, [f"Error executing command {' '.join(command)}: {e}"])

        if self.debug:
            InstallerLogger.debug(f"Command {' '.join(command)} returned {result.returncode}: {result.output}")

        return result

    def run_process_streaming(self, command: List[str], cwd: Optional[str] = None) -> ProcessResult:
        """Run a system process with its output going straight to the terminal (for progress indicators)."""

        if self.debug:
            InstallerLogger.debug(f"Running streaming command: {' '.join(command)}{f' in {cwd}' if cwd else ''}")

        try:
            return ProcessResult(subprocess.run(command, cwd=cwd, check=False, text=True).returncode)
        except FileNotFoundError:
            InstallerLogger.error(f"Command not found: {' '.join(command)}")
            return ProcessResult(127)
        except OSError as e:
            InstallerLogger.error(f"Error executing command {' '.join(command)}: {e}")
            return ProcessResult(1)

    def install(self, config, layout) -> InstallerResult:
        """Execute the full installation flow honoring ControlFlow.

        Order:
          1) Host directories
          2) Artifacts (compose manifest, node config, node and MDW archives)
          3) Extraction of the archives into the data root
          4) Node config patch for network and variant
          5) Compose .env
          6) Image pull and service start, when requested

        Any InstallerError ends the phase it was raised in as a failure and is
        re-raised; nothing already written is rolled back.
        """
        from get_aeternity.installer.actions import (
            artifacts,
            config_patch,
            env_writer,
            extraction,
            filesystem,
            orchestrator,
        )

        phase = InstallPhase.MATERIALIZING
        try:
            InstallerLogger.start(phase.value)
            filesystem.filesystem_prepare(layout, self)
            artifacts.ensure_artifact(
                layout.compose_path,
                config.manifest_url,
                artifacts.packaged_template_path(layout.compose_path),
                self,
            )
            artifacts.log_manifest_services(layout.compose_path, self)
            artifacts.ensure_artifact(
                layout.service_config_path,
                config.config_template_url,
                artifacts.packaged_template_path(layout.service_config_path),
                self,
            )
            archives = []
            for kind, requested, url in (
                (ArchiveKind.NODE, config.download_node, config.node_archive_url),
                (ArchiveKind.MDW, config.download_mdw, config.mdw_archive_url),
            ):
                if requested:
                    archives.append((kind, artifacts.materialize_archive(kind, url, layout, self)))
                else:
                    InstallerLogger.info(f"Skipping {kind.label} download.")
            InstallerLogger.end(phase.value, InstallerResult.SUCCESS)

            phase = InstallPhase.EXTRACTING
            InstallerLogger.start(phase.value)
            for kind, archive_path in archives:
                InstallerLogger.info(f"Extracting {kind.label} archive ...")
                extraction.extract_archive(archive_path, layout.data_root, self)
            InstallerLogger.end(
                phase.value,
                InstallerResult.SUCCESS if archives else InstallerResult.SKIPPED,
                None if archives else SkipReasons.NOT_REQUESTED,
            )

            phase = InstallPhase.PATCHING
            InstallerLogger.start(phase.value)
            changed = config_patch.patch_service_config(layout.service_config_path, config.network, config.variant, self)
            InstallerLogger.end(phase.value, InstallerResult.SUCCESS, None if changed else "already up to date")

            phase = InstallPhase.ENV_WRITING
            InstallerLogger.start(phase.value)
            env_writer.write_compose_env(layout, config, self)
            InstallerLogger.end(phase.value, InstallerResult.SUCCESS)

            phase = InstallPhase.INVOKING
            InstallerLogger.start(phase.value)
            result = orchestrator.start_services(config, layout, self)
            InstallerLogger.end(phase.value, result)

        except InstallerError as e:
            InstallerLogger.end(phase.value, InstallerResult.FAILURE, str(e))
            raise

        return InstallerResult.SKIPPED if self.is_dry_run() else InstallerResult.SUCCESS
