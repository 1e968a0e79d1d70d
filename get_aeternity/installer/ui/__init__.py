#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""User interaction implementations for the installer."""

from .shared.installer_ui import InstallerUI
from .silent.silent_installer_ui import SilentInstallerUI
from .tui.tui_installer_ui import TUIInstallerUI


def create_ui_implementation(non_interactive: bool) -> InstallerUI:
    """Select the interaction capability once at startup."""
    return SilentInstallerUI() if non_interactive else TUIInstallerUI()


__all__ = [
    "InstallerUI",
    "SilentInstallerUI",
    "TUIInstallerUI",
    "create_ui_implementation",
]
