#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.


from enum import Enum, auto


# Used primarily for getting status from discrete steps during the installer and subsequently logging
class InstallerResult(Enum):
    """Return status for an installation step."""

    SUCCESS = auto()
    FAILURE = auto()
    SKIPPED = auto()


# top-level control flow for the installer
class ControlFlow(Enum):
    """High-level control over what the installer should do.

    - DRYRUN: resolve, probe and display; make no changes (no file writes, no downloads, no containers)
    - INSTALL: perform every step
    """

    DRYRUN = auto()
    INSTALL = auto()

    def is_dry_run(self) -> bool:
        return self is ControlFlow.DRYRUN

    def should_write_files(self) -> bool:
        """returns True only when file writes are allowed"""
        return self is not ControlFlow.DRYRUN

    def would(self, action: str) -> str:
        """formats an action string appropriately for the current mode"""
        return ("Dry run: would " + action) if self is ControlFlow.DRYRUN else action


# states of a single installer run, in order; used as start/end log labels
class InstallPhase(Enum):
    RESOLVING = "Resolving Parameters"
    PROBING = "Probing Archive Sizes"
    CONFIRMING = "Confirming Settings"
    MATERIALIZING = "Materializing Artifacts"
    EXTRACTING = "Extracting Archives"
    PATCHING = "Patching Node Configuration"
    ENV_WRITING = "Writing Compose Environment"
    INVOKING = "Starting Services"


# which archive a step is dealing with
class ArchiveKind(Enum):
    NODE = "node"
    MDW = "mdw"

    @property
    def label(self) -> str:
        return "Node DB" if self is ArchiveKind.NODE else "MDW DB"
