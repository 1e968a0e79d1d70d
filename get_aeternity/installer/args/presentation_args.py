#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""
Presentation arguments for the get-aeternity installer.
"""


def add_presentation_args(parser):
    """
    Add interface mode arguments to the parser

    Args:
        parser: ArgumentParser to add arguments to
    """
    mode_group = parser.add_argument_group(title="Interface Mode")
    mode_group.add_argument(
        "-y",
        "--yes",
        "--non-interactive",
        dest="non_interactive",
        action="store_true",
        default=False,
        help="Run in non-interactive mode: accept defaults and environment overrides, no prompts",
    )
