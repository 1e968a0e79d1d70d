#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Exact-line patching of the node's aeternity.yaml for network and variant.

Each rule only matches a line holding nothing but the key and the value being
replaced, so applying the same rules a second time changes nothing.
"""

import os
import re
from dataclasses import dataclass
from typing import Iterable, List

from get_aeternity.aeternity_constants import DbVariant, Network
from get_aeternity.installer.utils.exceptions import InstallerError
from get_aeternity.installer.utils.logger_utils import InstallerLogger


@dataclass(frozen=True)
class PatchRule:
    """A line-anchored regex and its replacement (groups keep the key prefix and any CR)."""

    pattern: str
    replacement: str

    def apply(self, text: str) -> str:
        return re.sub(self.pattern, self.replacement, text, flags=re.MULTILINE)


def _line_rule(key: str, old_value: str, new_value: str) -> PatchRule:
    return PatchRule(
        pattern=rf"^([ \t]*{re.escape(key)}:[ \t]*){re.escape(old_value)}(\r?)$",
        replacement=rf"\g<1>{new_value}\g<2>",
    )


def network_rules(network: Network) -> List[PatchRule]:
    """Rewrite any other network's id on the network_id line to this network's id."""
    return [
        _line_rule("network_id", other.network_id, network.network_id)
        for other in Network
        if other is not network
    ]


def variant_rules(variant: DbVariant) -> List[PatchRule]:
    if variant.indexing_enabled:
        return [_line_rule("enabled", "false", "true")]
    return [_line_rule("enabled", "true", "false")]


def apply_rules(text: str, rules: Iterable[PatchRule]) -> str:
    for rule in rules:
        text = rule.apply(text)
    return text


def patch_service_config(config_path: str, network: Network, variant: DbVariant, platform) -> bool:
    """Patch config_path in place; returns True if the file content changed (or would change)."""
    if not os.path.isfile(config_path):
        if not platform.should_write_files():
            InstallerLogger.info(platform.would(f"set {network.network_id} and indexing={variant.value} in {config_path}"))
            return False
        raise InstallerError(f"Node configuration not found: {config_path}")

    # newline='' keeps the file's own line endings intact
    with open(config_path, "r", encoding="utf-8", newline="") as f:
        original = f.read()

    patched = apply_rules(original, network_rules(network) + variant_rules(variant))
    if patched == original:
        InstallerLogger.info(f"No changes needed for {os.path.basename(config_path)}")
        return False

    if platform.should_write_files():
        with open(config_path, "w", encoding="utf-8", newline="") as f:
            f.write(patched)
        InstallerLogger.info(f"Patched {config_path} for {network.network_id} ({variant.value})")
    else:
        InstallerLogger.info(platform.would(f"patch {config_path} for {network.network_id} ({variant.value})"))
    return True
