#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Convenience installer for an Aeternity node and middleware under Docker Compose."""

from get_aeternity.aeternity_constants import GET_AETERNITY_VERSION

__version__ = GET_AETERNITY_VERSION

__all__ = ["__version__"]
