#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Parameter resolution and the immutable installer configuration."""

from .install_config import HostLayout, InstallConfig
from .parameter_resolver import resolve_install_config

__all__ = ["HostLayout", "InstallConfig", "resolve_install_config"]
