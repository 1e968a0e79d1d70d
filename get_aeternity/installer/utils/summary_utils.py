#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.


"""Build and format configuration summaries for UI display."""

from typing import List, Tuple


def _display_bool(value: bool) -> str:
    return "Yes" if value else "No"


def _display_template(url) -> str:
    return url if url else "Packaged template"


def build_configuration_summary_items(config, layout) -> List[Tuple[str, str]]:
    """Build a list of configuration summary items for display.

    Args:
        config: InstallConfig for this run
        layout: HostLayout derived from config

    Returns:
        List of (label, value) tuples representing configuration items
    """
    return [
        ("Network", config.network.value),
        ("Database Variant", config.variant.value),
        ("Download Node DB", _display_bool(config.download_node)),
        ("Node DB Archive", config.node_archive_url),
        ("Download MDW DB", _display_bool(config.download_mdw)),
        ("MDW DB Archive", config.mdw_archive_url),
        ("Node Config Source", _display_template(config.config_template_url)),
        ("Compose File Source", _display_template(config.manifest_url)),
        ("Install Directory", layout.install_dir),
        ("Data Directory", layout.data_root),
        ("App Directory", layout.app_root),
        ("Start Services", _display_bool(config.start_after)),
    ]


def format_summary_value(label: str, value: str) -> str:
    """Format a label/value pair for display with consistent spacing."""
    return f"  {label:<22} = {value}"


def format_configuration_summary(config, layout) -> str:
    return "\n".join(
        ["Summary:"] + [format_summary_value(label, value) for label, value in build_configuration_summary_items(config, layout)]
    )
