#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

import os
from enum import Enum

###################################################################################################
GET_AETERNITY_VERSION = "0.1.0"
SCRIPT_NAME = "get-aeternity"

###################################################################################################
PLATFORM_WINDOWS = "Windows"
PLATFORM_MAC = "Darwin"
PLATFORM_LINUX = "Linux"


###################################################################################################
# target chain environments
class Network(Enum):
    MAINNET = "mainnet"
    UAT = "uat"

    @property
    def host_label(self) -> str:
        """Directory label used for host paths (mainnet|testnet)."""
        return "testnet" if self is Network.UAT else "mainnet"

    @property
    def network_id(self) -> str:
        """Token written to the node's network_id line."""
        return f"ae_{self.value}"


# accepted (lowercased) spellings for each network
NETWORK_SYNONYMS = {
    "mainnet": Network.MAINNET,
    "testnet": Network.UAT,
    "uat": Network.UAT,
}


###################################################################################################
# storage completeness modes for the node database
class DbVariant(Enum):
    FULL = "full"
    LIGHT = "light"

    @property
    def indexing_enabled(self) -> bool:
        return self is DbVariant.FULL


###################################################################################################
# snapshot locations
DATABASE_BACKUPS_BASE_URL = "https://aeternity-database-backups.s3.eu-central-1.amazonaws.com"

NODE_ARCHIVE_URLS = {
    (Network.MAINNET, DbVariant.FULL): f"{DATABASE_BACKUPS_BASE_URL}/main_v1_full_latest.tar.zst",
    (Network.MAINNET, DbVariant.LIGHT): f"{DATABASE_BACKUPS_BASE_URL}/main_v1_light_latest.tar.zst",
    (Network.UAT, DbVariant.FULL): f"{DATABASE_BACKUPS_BASE_URL}/uat_v1_full_latest.tar.zst",
    (Network.UAT, DbVariant.LIGHT): f"{DATABASE_BACKUPS_BASE_URL}/uat_v1_light_latest.tar.zst",
}

MDW_ARCHIVE_URLS = {
    Network.MAINNET: f"{DATABASE_BACKUPS_BASE_URL}/mdw_main_latest.tar.zst",
    Network.UAT: f"{DATABASE_BACKUPS_BASE_URL}/mdw_uat_latest.tar.zst",
}

# prefixes that mark a location as remote; anything else is a local filesystem path
REMOTE_URL_SCHEMES = ("http://", "https://", "s3://")

###################################################################################################
# published templates for the compose manifest and node configuration
TEMPLATES_BASE_URL = "https://raw.githubusercontent.com/aeternity/get-aeternity/master/templates"
DEFAULT_COMPOSE_URL = f"{TEMPLATES_BASE_URL}/docker-compose.yml"
DEFAULT_AETERNITY_YAML_URL = f"{TEMPLATES_BASE_URL}/aeternity.yaml"

# packaged copies of the templates, used when the URL is explicitly blanked
PACKAGED_TEMPLATES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "templates")

###################################################################################################
# generated filesystem layout
COMPOSE_FILENAME = "docker-compose.yml"
ENV_FILENAME = ".env"
AETERNITY_YAML_FILENAME = "aeternity.yaml"
DOWNLOADS_DIRNAME = "downloads"
DATA_DIRNAME = "data"
APP_DIRNAME = "app"
MNESIA_DIRNAME = "mnesia"
MDW_DB_DIRNAME = "mdw.db"
LOG_DIRNAME = "log"

###################################################################################################
# runtime tuning defaults written to the compose .env
ELIXIR_ERL_OPTIONS_DEFAULT = "-sbwt none -sbwtdcpu none -sbwtdio none"
LOG_FILE_PATH_DEFAULT = "/home/aeternity/ae_mdw/log/info.log"

###################################################################################################
# disk space estimate: extracted data plus working overhead vs. compressed archive total
REQUIRED_SPACE_MULTIPLIER = 2.5

###################################################################################################
# HTTP timeouts (connect, read) in seconds
HTTP_PROBE_TIMEOUT = (15, 30)
HTTP_DOWNLOAD_TIMEOUT = (30, 300)
DOWNLOAD_CHUNK_SIZE = 1024 * 1024
