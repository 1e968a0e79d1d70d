#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Unpack snapshot archives, using tar's own zstd support or falling back to unzstd."""

import os

from get_aeternity.aeternity_utils import remove_suffix
from get_aeternity.installer.configs.constants.enums import InstallerResult
from get_aeternity.installer.utils.exceptions import ExtractionError
from get_aeternity.installer.utils.logger_utils import InstallerLogger

ZSTD_SUFFIX = ".zst"
MISSING_ZSTD_MESSAGE = "Cannot extract: tar has no zstd support and 'unzstd' is not available. Install 'zstd' and retry."


def _check(result, what: str) -> None:
    if not result.ok:
        detail = "; ".join(result.output[-5:]) if result.output else f"exit code {result.returncode}"
        raise ExtractionError(f"{what} failed: {detail}")


def _intermediate_tar_path(archive_path: str) -> str:
    tar_path = remove_suffix(archive_path, ZSTD_SUFFIX)
    return tar_path if tar_path != archive_path else archive_path + ".tar"


def extract_archive(archive_path: str, dest_dir: str, platform) -> InstallerResult:
    """Extract archive_path into dest_dir, creating dest_dir if needed.

    Raises:
        ExtractionError: archive missing, no zstd capability, or the tools failed
    """
    is_zstd = archive_path.endswith(ZSTD_SUFFIX)
    native = (not is_zstd) or platform.tar_supports_zstd()
    can_decompress = native or platform.has_command("unzstd")

    if not platform.should_write_files():
        InstallerLogger.info(platform.would(f"extract {archive_path} to {dest_dir}"))
        if not can_decompress:
            InstallerLogger.warning(f"Extracting {archive_path} would fail: install zstd.")
        return InstallerResult.SKIPPED

    if not can_decompress:
        raise ExtractionError(MISSING_ZSTD_MESSAGE)

    if not os.path.isfile(archive_path):
        raise ExtractionError(f"Archive not found: {archive_path}")
    os.makedirs(dest_dir, exist_ok=True)

    if native:
        InstallerLogger.info(f"Extracting ({'tar --zstd' if is_zstd else 'tar'}) to {dest_dir} ...")
        command = ["tar", "--zstd", "-xf", archive_path, "-C", dest_dir] if is_zstd else ["tar", "-xf", archive_path, "-C", dest_dir]
        _check(platform.run_process(command), f"Extracting {archive_path}")
        return InstallerResult.SUCCESS

    tar_path = _intermediate_tar_path(archive_path)
    try:
        InstallerLogger.info("Decompressing with unzstd ...")
        _check(platform.run_process(["unzstd", "-f", "-q", archive_path, "-o", tar_path]), f"Decompressing {archive_path}")
        InstallerLogger.info(f"Extracting tar to {dest_dir} ...")
        _check(platform.run_process(["tar", "-xf", tar_path, "-C", dest_dir]), f"Extracting {tar_path}")
    finally:
        if os.path.isfile(tar_path):
            os.remove(tar_path)
    return InstallerResult.SUCCESS
