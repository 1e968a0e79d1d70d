#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

"""Merge CLI flags, environment variables and prompts into one InstallConfig.

Every question goes through the InstallerUI capability. The silent
implementation answers with the default, so the same code resolves both
interactive and non-interactive runs.
"""

import os
from dataclasses import dataclass
from typing import Callable, Mapping, Optional

from get_aeternity.aeternity_constants import (
    DEFAULT_AETERNITY_YAML_URL,
    DEFAULT_COMPOSE_URL,
    ELIXIR_ERL_OPTIONS_DEFAULT,
    LOG_FILE_PATH_DEFAULT,
    DbVariant,
    Network,
)
from get_aeternity.aeternity_utils import str2bool
from get_aeternity.installer.configs.constants.enums import InstallerResult, InstallPhase
from get_aeternity.installer.configs.constants.env_var_keys import (
    KEY_ENV_AETERNITY_YAML_URL,
    KEY_ENV_COMPOSE_URL,
    KEY_ENV_DB_VARIANT,
    KEY_ENV_DOWNLOAD_MDW_DB,
    KEY_ENV_DOWNLOAD_NODE_DB,
    KEY_ENV_ELIXIR_OPTS,
    KEY_ENV_INSTALL_DIR,
    KEY_ENV_LOG_FILE_PATH,
    KEY_ENV_MDW_TARBALL_URL,
    KEY_ENV_NETWORK,
    KEY_ENV_RUN_NOW,
    KEY_ENV_TARBALL_URL,
)
from get_aeternity.installer.core.install_config import InstallConfig
from get_aeternity.installer.core.selectors import normalize_network, normalize_variant
from get_aeternity.installer.core.size_probe import (
    RemoteArtifactDescriptor,
    describe_remote_artifact,
    estimate_required_space,
)
from get_aeternity.installer.core.url_resolver import resolve_mdw_archive_url, resolve_node_archive_url
from get_aeternity.installer.ui.shared.installer_ui import InstallerUI
from get_aeternity.installer.utils.exceptions import ValidationError
from get_aeternity.installer.utils.logger_utils import InstallerLogger

DOWNLOAD_QUESTION = "Download and extract the databases (node + MDW) now?"


def _env_bool(environ: Mapping[str, str], key: str, default: bool) -> bool:
    raw = environ.get(key, "")
    if not raw.strip():
        return default
    try:
        return str2bool(raw)
    except ValueError:
        raise ValidationError(key, raw, "true, false, yes, no, 1, 0") from None


def _env_template_url(environ: Mapping[str, str], key: str, default: str) -> Optional[str]:
    # unset means the published template; set-but-empty means the packaged one
    if key not in environ:
        return default
    return environ[key].strip() or None


@dataclass(frozen=True)
class EnvironmentInputs:
    """Raw installer inputs read from the process environment."""

    network: Optional[str]
    variant: str
    install_dir: Optional[str]
    download_node: bool
    download_mdw: bool
    node_archive_override: Optional[str]
    mdw_archive_override: Optional[str]
    manifest_url: Optional[str]
    config_template_url: Optional[str]
    run_now: bool
    elixir_erl_options: str
    log_file_path: str

    @classmethod
    def from_environ(cls, environ: Mapping[str, str]) -> "EnvironmentInputs":
        return cls(
            network=environ.get(KEY_ENV_NETWORK, "").strip() or None,
            variant=environ.get(KEY_ENV_DB_VARIANT, "").strip() or DbVariant.FULL.value,
            install_dir=environ.get(KEY_ENV_INSTALL_DIR, "").strip() or None,
            download_node=_env_bool(environ, KEY_ENV_DOWNLOAD_NODE_DB, True),
            download_mdw=_env_bool(environ, KEY_ENV_DOWNLOAD_MDW_DB, True),
            node_archive_override=environ.get(KEY_ENV_TARBALL_URL, "").strip() or None,
            mdw_archive_override=environ.get(KEY_ENV_MDW_TARBALL_URL, "").strip() or None,
            manifest_url=_env_template_url(environ, KEY_ENV_COMPOSE_URL, DEFAULT_COMPOSE_URL),
            config_template_url=_env_template_url(environ, KEY_ENV_AETERNITY_YAML_URL, DEFAULT_AETERNITY_YAML_URL),
            run_now=_env_bool(environ, KEY_ENV_RUN_NOW, True),
            elixir_erl_options=environ.get(KEY_ENV_ELIXIR_OPTS) or ELIXIR_ERL_OPTIONS_DEFAULT,
            log_file_path=environ.get(KEY_ENV_LOG_FILE_PATH) or LOG_FILE_PATH_DEFAULT,
        )


def _describe_archive(label: str, artifact: RemoteArtifactDescriptor) -> str:
    return f"{label}: {artifact.url} ({artifact.human_readable_size})"


def probe_archive_sizes(
    ui: InstallerUI,
    node_url: str,
    mdw_url: str,
    prober: Callable[[str], RemoteArtifactDescriptor] = describe_remote_artifact,
):
    """Probe both archives and display their sizes and the recommended free space.

    Probe failures only degrade the display to "unknown".
    """
    InstallerLogger.start(InstallPhase.PROBING.value)
    node = prober(node_url)
    mdw = prober(mdw_url)
    estimate = estimate_required_space(node, mdw)

    lines = [
        _describe_archive("Node DB", node),
        _describe_archive("MDW DB", mdw),
    ]
    if estimate is not None:
        lines.append(f"Combined compressed size: {estimate.total_human}")
        lines.append(
            f"Recommended free disk space (about 2.5x the compressed size): {estimate.required_human}"
        )
    else:
        lines.append("Combined size unknown; make sure there is plenty of free disk space.")
    ui.display_message("\n".join(lines))

    InstallerLogger.end(
        InstallPhase.PROBING.value,
        InstallerResult.SUCCESS if estimate is not None else InstallerResult.SKIPPED,
        None if estimate is not None else "one or more sizes unknown",
    )
    return node, mdw, estimate


def resolve_install_config(
    ui: InstallerUI,
    no_start: bool = False,
    environ: Optional[Mapping[str, str]] = None,
    cwd: Optional[str] = None,
    prober: Callable[[str], RemoteArtifactDescriptor] = describe_remote_artifact,
) -> InstallConfig:
    """Build the immutable InstallConfig for this run.

    Args:
        ui: Interaction capability (terminal or silent)
        no_start: True when --no-start was given; overrides RUN_NOW
        environ: Environment mapping (defaults to os.environ)
        cwd: Default installation directory (defaults to the current directory)
        prober: Size probe used for the pre-confirmation summary

    Raises:
        ValidationError: for unknown networks, variants or malformed booleans
    """
    env = EnvironmentInputs.from_environ(os.environ if environ is None else environ)

    InstallerLogger.start(InstallPhase.RESOLVING.value)
    variant = normalize_variant(env.variant)

    install_dir = ui.ask_string("Install directory", default=env.install_dir or cwd or os.getcwd()).strip()
    if not install_dir:
        raise ValidationError(KEY_ENV_INSTALL_DIR, install_dir, "a directory path")

    if env.network is not None:
        network = normalize_network(env.network)
    else:
        network = normalize_network(
            ui.ask_string("Network (mainnet|testnet)", default=Network.MAINNET.value)
        )

    node_url = resolve_node_archive_url(network, variant, env.node_archive_override)
    mdw_url = resolve_mdw_archive_url(network, env.mdw_archive_override)
    InstallerLogger.end(
        InstallPhase.RESOLVING.value,
        InstallerResult.SUCCESS,
        f"network={network.value} variant={variant.value}",
    )

    probe_archive_sizes(ui, node_url, mdw_url, prober=prober)

    download = ui.ask_yes_no(DOWNLOAD_QUESTION, default=True)
    if ui.is_interactive:
        # the answer decides both archives
        download_node = download_mdw = download
    else:
        download_node = download and env.download_node
        download_mdw = download and env.download_mdw

    return InstallConfig(
        network=network,
        variant=variant,
        install_dir=os.path.abspath(os.path.expanduser(install_dir)),
        download_node=download_node,
        download_mdw=download_mdw,
        node_archive_url=node_url,
        mdw_archive_url=mdw_url,
        manifest_url=env.manifest_url,
        config_template_url=env.config_template_url,
        start_after=(not no_start) and env.run_now,
        non_interactive=not ui.is_interactive,
        elixir_erl_options=env.elixir_erl_options,
        log_file_path=env.log_file_path,
    )
