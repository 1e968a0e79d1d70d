#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

import os

from get_aeternity.installer.configs.constants.enums import InstallerResult
from get_aeternity.installer.utils.logger_utils import InstallerLogger


def filesystem_prepare(layout, platform) -> InstallerResult:
    """Ensure the install, download, data and app directories exist (idempotent, respects dry-run)."""

    if not platform.should_write_files():
        for directory in layout.directories():
            InstallerLogger.info(platform.would(f"create directory: {directory}"))
        return InstallerResult.SKIPPED

    for directory in layout.directories():
        if not os.path.isdir(directory):
            os.makedirs(directory, exist_ok=True)
            InstallerLogger.info(f"Created directory: {directory}")
    return InstallerResult.SUCCESS
