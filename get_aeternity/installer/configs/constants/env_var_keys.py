#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

# environment variables read by the installer
KEY_ENV_NETWORK = "NETWORK"
KEY_ENV_DB_VARIANT = "DB_VARIANT"
KEY_ENV_DOWNLOAD_NODE_DB = "DOWNLOAD_NODE_DB"
KEY_ENV_DOWNLOAD_MDW_DB = "DOWNLOAD_MDW_DB"
KEY_ENV_INSTALL_DIR = "INSTALL_DIR"
KEY_ENV_TARBALL_URL = "TARBALL_URL"
KEY_ENV_MDW_TARBALL_URL = "MDW_TARBALL_URL"
KEY_ENV_AETERNITY_YAML_URL = "AETERNITY_YAML_URL"
KEY_ENV_COMPOSE_URL = "COMPOSE_URL"
KEY_ENV_RUN_NOW = "RUN_NOW"
KEY_ENV_ELIXIR_OPTS = "ELIXIR_OPTS"
KEY_ENV_LOG_FILE_PATH = "LOG_FILE_PATH"

# keys written to the compose .env file
KEY_DOTENV_HOST_NETWORK_LABEL = "HOST_NETWORK_LABEL"
KEY_DOTENV_HOST_DATA_ROOT = "HOST_DATA_ROOT"
KEY_DOTENV_HOST_APP_ROOT = "HOST_APP_ROOT"
KEY_DOTENV_ELIXIR_ERL_OPTIONS = "ELIXIR_ERL_OPTIONS"
KEY_DOTENV_LOG_FILE_PATH = "LOG_FILE_PATH"
