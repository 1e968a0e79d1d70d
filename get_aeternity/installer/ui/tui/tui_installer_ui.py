#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Terminal UI implementation for the installer."""

from get_aeternity.aeternity_common import AskForString, YesOrNo
from get_aeternity.installer.ui.shared.installer_ui import InstallerUI


class TUIInstallerUI(InstallerUI):
    """Terminal UI implementation reading answers from stdin."""

    @property
    def is_interactive(self) -> bool:
        return True

    def ask_yes_no(self, message: str, default: bool = True) -> bool:
        return YesOrNo(message, default=default)

    def ask_string(self, prompt: str, default: str = "") -> str:
        return AskForString(prompt, default=default)

    def display_message(self, message: str) -> None:
        print(message, flush=True)
