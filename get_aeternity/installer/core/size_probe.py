#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Estimate archive download sizes with metadata-only (HEAD) requests."""

from dataclasses import dataclass
from typing import Optional

import requests

from get_aeternity.aeternity_constants import HTTP_PROBE_TIMEOUT, REQUIRED_SPACE_MULTIPLIER
from get_aeternity.aeternity_utils import human_size
from get_aeternity.installer.core.url_resolver import is_remote_url, to_http_url
from get_aeternity.installer.utils.exceptions import ProbeError
from get_aeternity.installer.utils.logger_utils import InstallerLogger


@dataclass(frozen=True)
class RemoteArtifactDescriptor:
    url: str
    byte_size: Optional[int] = None

    @property
    def human_readable_size(self) -> str:
        return human_size(self.byte_size)


@dataclass(frozen=True)
class SizeEstimate:
    total_bytes: int
    required_bytes: int

    @property
    def total_human(self) -> str:
        return human_size(self.total_bytes)

    @property
    def required_human(self) -> str:
        return human_size(self.required_bytes)


def probe_content_length(url: str, timeout=HTTP_PROBE_TIMEOUT) -> int:
    """Return the Content-Length reported for url.

    Raises ProbeError on transport errors, non-2xx responses, and missing or
    unparsable headers.
    """
    if not is_remote_url(url):
        raise ProbeError(f"{url} is not a remote URL")
    try:
        response = requests.head(to_http_url(url), allow_redirects=True, timeout=timeout)
    except requests.RequestException as e:
        raise ProbeError(f"HEAD {url} failed: {e}") from e

    if not response.ok:
        raise ProbeError(f"HEAD {url} returned HTTP {response.status_code}")

    raw_length = response.headers.get("Content-Length", "").strip()
    if not raw_length.isdigit() or int(raw_length) == 0:
        raise ProbeError(f"HEAD {url} returned no usable Content-Length ({raw_length or 'missing'})")

    return int(raw_length)


def describe_remote_artifact(url: str) -> RemoteArtifactDescriptor:
    """Probe url, degrading to an unknown size instead of failing."""
    try:
        return RemoteArtifactDescriptor(url=url, byte_size=probe_content_length(url))
    except ProbeError as e:
        InstallerLogger.debug(f"Size probe: {e}")
        return RemoteArtifactDescriptor(url=url, byte_size=None)


def estimate_required_space(
    node: RemoteArtifactDescriptor, mdw: RemoteArtifactDescriptor
) -> Optional[SizeEstimate]:
    """Combined compressed size and recommended free space, or None if either size is unknown."""
    if node.byte_size is None or mdw.byte_size is None:
        return None
    total = node.byte_size + mdw.byte_size
    return SizeEstimate(total_bytes=total, required_bytes=round(total * REQUIRED_SPACE_MULTIPLIER))
