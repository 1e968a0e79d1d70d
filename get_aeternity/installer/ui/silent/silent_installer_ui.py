#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Non-interactive UI: every question is answered with its default."""

from get_aeternity.installer.ui.shared.installer_ui import InstallerUI
from get_aeternity.installer.utils.logger_utils import InstallerLogger


class SilentInstallerUI(InstallerUI):
    """Applies defaults and environment overrides without prompting."""

    @property
    def is_interactive(self) -> bool:
        return False

    def ask_yes_no(self, message: str, default: bool = True) -> bool:
        InstallerLogger.debug(f"Non-interactive: '{message}' -> {'yes' if default else 'no'}")
        return bool(default)

    def ask_string(self, prompt: str, default: str = "") -> str:
        InstallerLogger.debug(f"Non-interactive: '{prompt}' -> '{default}'")
        return default

    def display_message(self, message: str) -> None:
        for line in str(message).splitlines():
            InstallerLogger.info(line)
