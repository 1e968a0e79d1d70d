#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Immutable installer configuration and the host layout derived from it."""

import os
from dataclasses import dataclass
from typing import Optional

from get_aeternity.aeternity_constants import (
    AETERNITY_YAML_FILENAME,
    APP_DIRNAME,
    COMPOSE_FILENAME,
    DATA_DIRNAME,
    DOWNLOADS_DIRNAME,
    ENV_FILENAME,
    LOG_DIRNAME,
    MDW_DB_DIRNAME,
    MNESIA_DIRNAME,
    DbVariant,
    Network,
)


@dataclass(frozen=True)
class InstallConfig:
    """Every choice the installer acts on, fixed once the confirmation gate passes.

    Archive URLs may be remote (http/https/s3) or local filesystem paths. A
    manifest_url or config_template_url of None selects the packaged template.
    """

    network: Network
    variant: DbVariant
    install_dir: str
    download_node: bool
    download_mdw: bool
    node_archive_url: str
    mdw_archive_url: str
    manifest_url: Optional[str]
    config_template_url: Optional[str]
    start_after: bool
    non_interactive: bool
    elixir_erl_options: str
    log_file_path: str


@dataclass(frozen=True)
class HostLayout:
    """Host directories and files, namespaced by the network's host label."""

    install_dir: str
    network_label: str

    @classmethod
    def from_config(cls, config: InstallConfig) -> "HostLayout":
        return cls(
            install_dir=os.path.abspath(config.install_dir),
            network_label=config.network.host_label,
        )

    @property
    def downloads_dir(self) -> str:
        return os.path.join(self.install_dir, DOWNLOADS_DIRNAME)

    @property
    def data_root(self) -> str:
        return os.path.join(self.install_dir, DATA_DIRNAME, self.network_label)

    @property
    def app_root(self) -> str:
        return os.path.join(self.install_dir, APP_DIRNAME, self.network_label)

    @property
    def mnesia_dir(self) -> str:
        return os.path.join(self.data_root, MNESIA_DIRNAME)

    @property
    def mdw_db_dir(self) -> str:
        return os.path.join(self.data_root, MDW_DB_DIRNAME)

    @property
    def log_dir(self) -> str:
        return os.path.join(self.app_root, LOG_DIRNAME)

    @property
    def compose_path(self) -> str:
        return os.path.join(self.install_dir, COMPOSE_FILENAME)

    @property
    def env_path(self) -> str:
        return os.path.join(self.install_dir, ENV_FILENAME)

    @property
    def service_config_path(self) -> str:
        return os.path.join(self.app_root, AETERNITY_YAML_FILENAME)

    def directories(self):
        """Directories created before any archive is extracted."""
        return (
            self.install_dir,
            self.downloads_dir,
            self.mnesia_dir,
            self.mdw_db_dir,
            self.log_dir,
        )
