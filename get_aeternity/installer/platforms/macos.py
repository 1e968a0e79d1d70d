#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""macOS-specific installer implementation."""

from .base import BaseInstaller


class MacInstaller(BaseInstaller):
    """macOS installer; bsdtar lists its compression libraries in --version."""

    def tar_supports_zstd(self) -> bool:
        for probe in (["tar", "--version"], ["tar", "--help"]):
            result = self.run_process(probe, stderr=False)
            if result.ok and any("zstd" in line for line in result.output):
                return True
        return False
