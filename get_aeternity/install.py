#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Set up an Aeternity node and middleware under Docker Compose.

Resolves network and database variant, fetches the database snapshots,
prepares docker-compose.yml, aeternity.yaml and .env in the install directory,
then optionally pulls images and starts the services.
"""

import argparse
import os
import sys

if __package__ in (None, ""):
    # executed as a plain script (python get_aeternity/install.py)
    sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from get_aeternity.aeternity_constants import GET_AETERNITY_VERSION, SCRIPT_NAME
from get_aeternity.installer.args import add_basic_args, add_presentation_args
from get_aeternity.installer.actions.orchestrator import check_prerequisites
from get_aeternity.installer.configs.constants.enums import ControlFlow, InstallerResult, InstallPhase
from get_aeternity.installer.core.install_config import HostLayout
from get_aeternity.installer.core.parameter_resolver import resolve_install_config
from get_aeternity.installer.platforms import get_platform_installer
from get_aeternity.installer.ui import create_ui_implementation
from get_aeternity.installer.utils.exceptions import InstallerError
from get_aeternity.installer.utils.logger_utils import InstallerLogger, SkipReasons
from get_aeternity.installer.utils.summary_utils import format_configuration_summary

PROCEED_QUESTION = "Proceed with these settings?"


class InstallerArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on bad usage."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_arg_parser(parser: argparse.ArgumentParser) -> None:
    """Add arguments specific to the installer itself"""
    add_basic_args(parser)
    add_presentation_args(parser)


def confirm_install(ui, config, layout) -> bool:
    """Show the final summary and ask once before anything on the host changes."""
    InstallerLogger.start(InstallPhase.CONFIRMING.value)
    ui.display_message(format_configuration_summary(config, layout))
    approved = ui.ask_yes_no(PROCEED_QUESTION, default=True)
    InstallerLogger.end(
        InstallPhase.CONFIRMING.value,
        InstallerResult.SUCCESS if approved else InstallerResult.SKIPPED,
        None if approved else "declined",
    )
    return approved


def main(argv=None, environ=None, ui=None, platform=None) -> int:
    parser = InstallerArgumentParser(
        prog=SCRIPT_NAME,
        description=f"Aeternity node + middleware installer (v{GET_AETERNITY_VERSION})",
        conflict_handler="resolve",
    )
    build_arg_parser(parser)
    parsed_args = parser.parse_args(argv)

    control_flow = ControlFlow.DRYRUN if parsed_args.dryRun else ControlFlow.INSTALL

    if parsed_args.quiet:
        InstallerLogger.set_console_output(False)

    if parsed_args.debug:
        InstallerLogger.set_debug_enabled(True)

    # handle log file setup if --log-to-file was specified
    if parsed_args.logToFile is not None:
        if parsed_args.logToFile == "":
            log_filename = InstallerLogger.generate_timestamped_filename()
            InstallerLogger.info(f"No log filename specified, using: {log_filename}")
        else:
            log_filename = parsed_args.logToFile

        InstallerLogger.set_log_file(log_filename)
        InstallerLogger.info(f"Logging to file: {log_filename}")

    InstallerLogger.debug(f"Arguments: {parsed_args}")

    try:
        ui = ui or create_ui_implementation(parsed_args.non_interactive)
        platform = platform or get_platform_installer(parsed_args.debug, control_flow=control_flow)
        if control_flow.is_dry_run():
            InstallerLogger.info("Dry run: no files will be written, nothing will be downloaded or started")

        check_prerequisites(platform)

        config = resolve_install_config(ui, no_start=parsed_args.noStart, environ=environ)
        layout = HostLayout.from_config(config)

        if not confirm_install(ui, config, layout):
            InstallerLogger.info("Aborted by user.")
            return 0

        InstallerLogger.start("INSTALLER")
        platform.install(config, layout)
        InstallerLogger.end(
            "INSTALLER",
            InstallerResult.SKIPPED if control_flow.is_dry_run() else InstallerResult.SUCCESS,
            SkipReasons.DRY_RUN if control_flow.is_dry_run() else "Installation completed successfully",
        )
        InstallerLogger.info(f"Done. Data dir: {layout.data_root} | App dir: {layout.app_root}")
        return 0

    except InstallerError as e:
        InstallerLogger.error(str(e))
        return 1
    except NotImplementedError as e:
        InstallerLogger.error(str(e))
        return 1


def run():
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        InstallerLogger.error("Installation cancelled by user.")
        sys.exit(1)
    except Exception as e:
        import traceback

        tb = traceback.format_exc()
        InstallerLogger.error(f"Error executing main(): {e}")
        InstallerLogger.debug(f"Main debug: {e}\n{tb}")
        sys.exit(1)


if __name__ == "__main__":
    run()
