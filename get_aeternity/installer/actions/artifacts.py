#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Make sure each managed artifact exists at its target path.

An artifact that is already present is never inspected or replaced, which is
what makes re-running the installer after a failure safe.
"""

import os
import shutil
from typing import Optional
from urllib.parse import unquote, urlparse

import requests
from ruamel.yaml.error import YAMLError

from get_aeternity.aeternity_common import DownloadToFile, GetComposeServiceNames
from get_aeternity.aeternity_constants import DOWNLOAD_CHUNK_SIZE, HTTP_DOWNLOAD_TIMEOUT, PACKAGED_TEMPLATES_DIR
from get_aeternity.installer.configs.constants.enums import ArchiveKind, InstallerResult
from get_aeternity.installer.core.url_resolver import is_remote_url, to_http_url
from get_aeternity.installer.utils.exceptions import DownloadError, TemplateMissingError
from get_aeternity.installer.utils.logger_utils import InstallerLogger

PARTIAL_DOWNLOAD_SUFFIX = ".part"


def packaged_template_path(target_path: str) -> str:
    """The template shipped with this package for an artifact of the same file name."""
    return os.path.join(PACKAGED_TEMPLATES_DIR, os.path.basename(target_path))


def download_artifact(url: str, path: str, platform) -> int:
    """Stream url to path through a temporary sibling, renamed into place once complete.

    Raises:
        DownloadError: on any transport error or non-2xx response
    """
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    partial_path = path + PARTIAL_DOWNLOAD_SUFFIX
    try:
        size = DownloadToFile(
            to_http_url(url),
            partial_path,
            timeout=HTTP_DOWNLOAD_TIMEOUT,
            chunk_size=DOWNLOAD_CHUNK_SIZE,
            debug=platform.debug,
        )
    except (requests.RequestException, OSError) as e:
        if os.path.isfile(partial_path):
            os.remove(partial_path)
        raise DownloadError(url, e) from e
    os.replace(partial_path, path)
    return size


def ensure_artifact(path: str, source_url: Optional[str], template_path: str, platform) -> InstallerResult:
    """Make path exist: keep it if present, else fetch source_url, else copy template_path.

    source_url may also be a local file, which is copied like a template.

    Raises:
        DownloadError: the fetch failed
        TemplateMissingError: there is nothing to copy from
    """
    name = os.path.basename(path)
    if os.path.isfile(path):
        InstallerLogger.info(f"{name} already exists; leaving it unchanged.")
        return InstallerResult.SKIPPED

    if source_url and is_remote_url(source_url):
        if not platform.should_write_files():
            InstallerLogger.info(platform.would(f"download {name} from {source_url}"))
            return InstallerResult.SKIPPED
        InstallerLogger.info(f"Downloading {name} ...")
        download_artifact(source_url, path, platform)
        return InstallerResult.SUCCESS

    copy_from = os.path.expanduser(source_url) if source_url else template_path
    if not os.path.isfile(copy_from):
        raise TemplateMissingError(copy_from)
    if not platform.should_write_files():
        InstallerLogger.info(platform.would(f"copy {name} from {copy_from}"))
        return InstallerResult.SKIPPED
    InstallerLogger.info(f"Copying {name} from {'local template' if copy_from == template_path else copy_from}")
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    shutil.copyfile(copy_from, path)
    return InstallerResult.SUCCESS


def archive_filename(url: str, kind: ArchiveKind) -> str:
    name = os.path.basename(unquote(urlparse(url).path))
    return name or f"{kind.value}.tar.zst"


def materialize_archive(kind: ArchiveKind, url: str, layout, platform) -> str:
    """Return the local path of the archive for kind, downloading it into downloads/ if needed.

    A location without a remote scheme is an existing local archive and is
    returned as-is, without going anywhere near the network.
    """
    if not is_remote_url(url):
        local_path = os.path.abspath(os.path.expanduser(url))
        InstallerLogger.info(f"Using local {kind.label} archive: {local_path}")
        return local_path

    target = os.path.join(layout.downloads_dir, archive_filename(url, kind))
    if os.path.isfile(target):
        InstallerLogger.info(f"{kind.label} archive already downloaded; reusing {target}")
        return target

    if not platform.should_write_files():
        InstallerLogger.info(platform.would(f"download {kind.label} archive from {url} to {target}"))
        return target

    InstallerLogger.info(f"Downloading {kind.label} archive ... (large download, please be patient)")
    size = download_artifact(url, target, platform)
    InstallerLogger.info(f"Downloaded {kind.label} archive ({size} bytes) to {target}")
    return target


def log_manifest_services(compose_path: str, platform) -> None:
    """Log the services defined by the compose manifest; a bad manifest is only a warning."""
    if not os.path.isfile(compose_path):
        if platform.should_write_files():
            InstallerLogger.warning(f"Compose file {compose_path} not found")
        return
    try:
        services = GetComposeServiceNames(compose_path)
    except (YAMLError, OSError) as e:
        InstallerLogger.warning(f"Could not parse {compose_path}: {e}")
        return
    if services:
        InstallerLogger.info(f"Compose services: {', '.join(services)}")
    else:
        InstallerLogger.warning(f"No services defined in {compose_path}")
