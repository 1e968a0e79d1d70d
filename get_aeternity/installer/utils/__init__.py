#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""
Utility helpers shared by the installer UI implementations, the parameter
resolver, and the installation actions.
"""

from .logger_utils import InstallerLogger

from .exceptions import (
    DownloadError,
    ExtractionError,
    InstallerError,
    MissingDependencyError,
    OrchestratorError,
    ProbeError,
    TemplateMissingError,
    ValidationError,
)

__all__ = [
    "InstallerLogger",
    "DownloadError",
    "ExtractionError",
    "InstallerError",
    "MissingDependencyError",
    "OrchestratorError",
    "ProbeError",
    "TemplateMissingError",
    "ValidationError",
]
