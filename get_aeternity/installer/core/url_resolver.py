#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Default snapshot locations and remote-vs-local classification."""

from typing import Optional
from urllib.parse import urlparse

from get_aeternity.aeternity_constants import (
    MDW_ARCHIVE_URLS,
    NODE_ARCHIVE_URLS,
    REMOTE_URL_SCHEMES,
    DbVariant,
    Network,
)


def is_remote_url(location: Optional[str]) -> bool:
    """True when location starts with a recognized remote scheme; anything else is a local path."""
    return bool(location) and str(location).lower().startswith(REMOTE_URL_SCHEMES)


def resolve_node_archive_url(network: Network, variant: DbVariant, override: Optional[str] = None) -> str:
    if override:
        return override
    return NODE_ARCHIVE_URLS[(network, variant)]


def resolve_mdw_archive_url(network: Network, override: Optional[str] = None) -> str:
    if override:
        return override
    return MDW_ARCHIVE_URLS[network]


def to_http_url(url: str) -> str:
    """Translate s3://bucket/key into the bucket's public HTTPS endpoint; other URLs pass through."""
    parsed = urlparse(url)
    if parsed.scheme.lower() == "s3" and parsed.netloc:
        return f"https://{parsed.netloc}.s3.amazonaws.com/{parsed.path.lstrip('/')}"
    return url
