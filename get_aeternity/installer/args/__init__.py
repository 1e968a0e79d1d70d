#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

from .basic_args import add_basic_args
from .presentation_args import add_presentation_args

__all__ = ["add_basic_args", "add_presentation_args"]
