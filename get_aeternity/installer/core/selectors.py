#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Canonicalize the network and database variant selectors."""

from get_aeternity.aeternity_constants import NETWORK_SYNONYMS, DbVariant, Network
from get_aeternity.installer.utils.exceptions import ValidationError


def normalize_network(value) -> Network:
    """Map mainnet, testnet or uat (any case) to a Network."""
    if isinstance(value, Network):
        return value
    try:
        return NETWORK_SYNONYMS[str(value).strip().lower()]
    except KeyError:
        raise ValidationError("NETWORK", value, "mainnet, testnet (uat)") from None


def normalize_variant(value) -> DbVariant:
    if isinstance(value, DbVariant):
        return value
    try:
        return DbVariant(str(value).strip().lower())
    except ValueError:
        raise ValidationError("DB_VARIANT", value, "full, light") from None
