#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Custom exceptions for the Aeternity installer."""


class InstallerError(Exception):
    """Base class for fatal installer errors."""

    pass


class ValidationError(InstallerError):
    """Raised when a network, variant or other parameter is not acceptable."""

    def __init__(self, name: str, value, allowed: str):
        super().__init__(f"Invalid {name} '{value}'. Allowed: {allowed}.")
        self.name = name
        self.value = value


class MissingDependencyError(InstallerError):
    """Raised when a required external tool is not available."""

    def __init__(self, command: str, hint: str = ""):
        super().__init__(f"Required command '{command}' not found. {hint or 'Please install it and re-run.'}")
        self.command = command


class ProbeError(InstallerError):
    """Raised when a remote size probe fails; callers degrade to an unknown size."""

    pass


class DownloadError(InstallerError):
    """Raised when fetching a remote artifact fails."""

    def __init__(self, url: str, reason):
        super().__init__(f"Download of {url} failed: {reason}")
        self.url = url


class ExtractionError(InstallerError):
    """Raised when an archive cannot be decompressed or unpacked."""

    pass


class TemplateMissingError(InstallerError):
    """Raised when an artifact has neither a source URL nor a packaged template."""

    def __init__(self, template_path: str):
        super().__init__(f"Template not found: {template_path}")
        self.template_path = template_path


class OrchestratorError(InstallerError):
    """Raised when a compose pull/start subprocess exits non-zero."""

    def __init__(self, action: str, returncode: int):
        super().__init__(f"Docker Compose {action} failed with exit code {returncode}")
        self.action = action
        self.returncode = returncode
