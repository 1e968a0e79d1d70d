#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Linux-specific installer implementation."""

from .base import BaseInstaller


class LinuxInstaller(BaseInstaller):
    """Linux installer; GNU tar advertises --zstd in its help text."""

    def tar_supports_zstd(self) -> bool:
        result = self.run_process(["tar", "--help"], stderr=False)
        return result.ok and any("zstd" in line for line in result.output)
