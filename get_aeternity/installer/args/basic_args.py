#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""
Basic ungrouped arguments for the get-aeternity installer
"""

from get_aeternity.aeternity_constants import GET_AETERNITY_VERSION, SCRIPT_NAME
from get_aeternity.aeternity_utils import str2bool


def add_basic_args(parser):
    """
    Add basic ungrouped arguments to the parser

    Args:
        parser: ArgumentParser to add arguments to
    """
    basicArgGroup = parser.add_argument_group("Installer Options")

    basicArgGroup.add_argument(
        "--debug",
        "--verbose",
        dest="debug",
        type=str2bool,
        nargs="?",
        metavar="true|false",
        const=True,
        default=False,
        help="Enable debug output including tracebacks and subprocess output",
    )
    basicArgGroup.add_argument(
        "--quiet",
        "--silent",
        action="store_true",
        dest="quiet",
        default=False,
        help="Suppress console logging output during installation",
    )
    basicArgGroup.add_argument(
        "--dry-run",
        dest="dryRun",
        action="store_true",
        default=False,
        help="Resolve, probe and print the plan without downloading, writing files or starting containers",
    )
    basicArgGroup.add_argument(
        "--no-start",
        dest="noStart",
        action="store_true",
        default=False,
        help="Do not pull images and start services after setup",
    )
    basicArgGroup.add_argument(
        "--log-to-file",
        dest="logToFile",
        metavar="filename",
        nargs="?",
        const="",
        default=None,
        help="Log output to file. If no filename provided, creates timestamped log file.",
    )
    basicArgGroup.add_argument(
        "--version",
        action="version",
        version=f"{SCRIPT_NAME} {GET_AETERNITY_VERSION}",
    )
