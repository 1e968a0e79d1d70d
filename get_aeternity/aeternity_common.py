#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

import os

from enum import IntFlag, auto
from typing import List, Optional

import requests
from ruamel.yaml import YAML

from get_aeternity.aeternity_utils import eprint


###################################################################################################
class UserInputDefaultsBehavior(IntFlag):
    DefaultsPrompt = auto()
    DefaultsAccept = auto()
    DefaultsNonInteractive = auto()


###################################################################################################
def _read_reply(prompt: str) -> str:
    # a closed stdin behaves like the user just pressing enter
    try:
        return str(input(prompt)).strip()
    except EOFError:
        return ""


###################################################################################################
# get interactive user response to Y/N question
def YesOrNo(
    question,
    default=None,
    defaultBehavior=UserInputDefaultsBehavior.DefaultsPrompt | UserInputDefaultsBehavior.DefaultsAccept,
):
    if (default is not None) and (
        (defaultBehavior & UserInputDefaultsBehavior.DefaultsAccept)
        and (defaultBehavior & UserInputDefaultsBehavior.DefaultsNonInteractive)
    ):
        return bool(default)

    if (default is not None) and defaultBehavior & UserInputDefaultsBehavior.DefaultsPrompt:
        questionStr = f"{question} [{'Y/n' if default else 'y/N'}]: "
    else:
        questionStr = f"{question} [y/n]: "

    while True:
        reply = _read_reply(questionStr).lower()
        if reply in ("y", "yes", "t", "true", "1"):
            return True
        elif reply in ("n", "no", "f", "false", "0"):
            return False
        elif (len(reply) == 0) and (defaultBehavior & UserInputDefaultsBehavior.DefaultsAccept) and (default is not None):
            return bool(default)
        elif len(reply) > 0:
            eprint(f"Please answer yes or no (got '{reply}')")


###################################################################################################
# get interactive user response
def AskForString(
    question,
    default=None,
    defaultBehavior=UserInputDefaultsBehavior.DefaultsPrompt | UserInputDefaultsBehavior.DefaultsAccept,
):
    if (default is not None) and (
        (defaultBehavior & UserInputDefaultsBehavior.DefaultsAccept)
        and (defaultBehavior & UserInputDefaultsBehavior.DefaultsNonInteractive)
    ):
        return default

    reply = _read_reply(
        f"{question}{f' [{default}]' if (default is not None) and (defaultBehavior & UserInputDefaultsBehavior.DefaultsPrompt) else ''}: "
    )
    if (len(reply) == 0) and (default is not None) and (defaultBehavior & UserInputDefaultsBehavior.DefaultsAccept):
        reply = default

    return reply


###################################################################################################
def LoadYaml(inputFileName):
    result = None
    if inputFileName and os.path.isfile(inputFileName):
        with open(inputFileName, 'r') as f:
            inYaml = YAML(typ='safe', pure=True)
            result = inYaml.load(f)
    return result


###################################################################################################
# names of the services defined in a docker-compose file, or None if it can't be read as one
def GetComposeServiceNames(composeFileName) -> Optional[List[str]]:
    data = LoadYaml(composeFileName)
    if isinstance(data, dict) and isinstance(data.get('services'), dict):
        return [str(name) for name in data['services'].keys()]
    return None


###################################################################################################
# stream a URL to a local file; raises requests.RequestException on transport errors or non-2xx status
def DownloadToFile(url, local_filename, timeout=None, chunk_size=1024 * 1024, debug=False):
    with requests.get(url, stream=True, allow_redirects=True, timeout=timeout) as r:
        r.raise_for_status()
        with open(local_filename, 'wb') as f:
            for chunk in r.iter_content(chunk_size=chunk_size):
                if chunk:
                    f.write(chunk)
    fSize = os.path.getsize(local_filename)
    if debug:
        eprint(f"Download of {url} to {local_filename} completed ({fSize} bytes)")
    return fSize
