#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

import os

from dotenv import set_key

from get_aeternity.installer.configs.constants.enums import InstallerResult
from get_aeternity.installer.configs.constants.env_var_keys import (
    KEY_DOTENV_ELIXIR_ERL_OPTIONS,
    KEY_DOTENV_HOST_APP_ROOT,
    KEY_DOTENV_HOST_DATA_ROOT,
    KEY_DOTENV_HOST_NETWORK_LABEL,
    KEY_DOTENV_LOG_FILE_PATH,
)
from get_aeternity.installer.utils.logger_utils import InstallerLogger

ENV_FILE_HEADER = "# Generated by get-aeternity\n"


def compose_env_values(layout, config) -> dict:
    """Key/value pairs consumed by docker-compose.yml, in file order."""
    return {
        KEY_DOTENV_HOST_NETWORK_LABEL: layout.network_label,
        KEY_DOTENV_HOST_DATA_ROOT: layout.data_root,
        KEY_DOTENV_HOST_APP_ROOT: layout.app_root,
        KEY_DOTENV_ELIXIR_ERL_OPTIONS: config.elixir_erl_options,
        KEY_DOTENV_LOG_FILE_PATH: config.log_file_path,
    }


def write_compose_env(layout, config, platform) -> InstallerResult:
    """Regenerate the compose .env from scratch; it is rewritten on every run."""
    values = compose_env_values(layout, config)

    if not platform.should_write_files():
        InstallerLogger.info(platform.would(f"write compose .env at {layout.env_path}"))
        for key, value in values.items():
            InstallerLogger.debug(f"  {key}={value}")
        return InstallerResult.SKIPPED

    InstallerLogger.info(f"Writing compose .env at {layout.env_path} ...")
    os.makedirs(os.path.dirname(layout.env_path), exist_ok=True)
    with open(layout.env_path, "w", encoding="utf-8") as f:
        f.write(ENV_FILE_HEADER)

    for key, value in values.items():
        set_key(layout.env_path, key, str(value), quote_mode="never", encoding="utf-8")

    InstallerLogger.info(f"Wrote environment file: {os.path.basename(layout.env_path)}")
    return InstallerResult.SUCCESS
