#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Platform-specific installer implementations."""

import platform

from get_aeternity.aeternity_constants import PLATFORM_LINUX, PLATFORM_MAC, PLATFORM_WINDOWS

from .base import BaseInstaller, ProcessResult
from .linux import LinuxInstaller
from .macos import MacInstaller


def get_platform_installer(debug: bool = False, control_flow=None) -> BaseInstaller:
    """Determine the current host platform and return the matching installer."""

    platform_name = platform.system()

    if platform_name == PLATFORM_LINUX:
        return LinuxInstaller(debug, control_flow=control_flow)
    elif platform_name == PLATFORM_MAC:
        return MacInstaller(debug, control_flow=control_flow)
    elif platform_name == PLATFORM_WINDOWS:
        raise NotImplementedError("Windows installation is not supported. Please use Linux or macOS.")
    else:
        raise NotImplementedError(f"Platform '{platform_name}' is not supported")


__all__ = [
    "BaseInstaller",
    "LinuxInstaller",
    "MacInstaller",
    "ProcessResult",
    "get_platform_installer",
]
