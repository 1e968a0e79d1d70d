#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright (c) 2025 Battelle Energy Alliance, LLC.  All rights reserved.

import os
import sys

from datetime import datetime
from typing import Optional


###################################################################################################
# print to stderr
def eprint(*args, **kwargs):
    filteredArgs = (
        {k: v for (k, v) in kwargs.items() if k not in ("timestamp", "flush")} if isinstance(kwargs, dict) else {}
    )
    if "timestamp" in kwargs and kwargs["timestamp"]:
        print(
            datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
            *args,
            file=sys.stderr,
            **filteredArgs,
        )
    else:
        print(*args, file=sys.stderr, **filteredArgs)
    if "flush" in kwargs and kwargs["flush"]:
        sys.stderr.flush()


###################################################################################################
def remove_suffix(text, suffix):
    if suffix and text.endswith(suffix):
        return text[: -len(suffix)]
    else:
        return text


###################################################################################################
# convenient boolean argument parsing
def str2bool(v):
    if isinstance(v, bool):
        return v
    elif isinstance(v, str):
        if v.strip().lower() in ("yes", "true", "t", "y", "1"):
            return True
        elif v.strip().lower() in ("no", "false", "f", "n", "0", ""):
            return False
        else:
            raise ValueError("Boolean value expected")
    elif not v:
        return False
    else:
        raise ValueError("Boolean value expected")


###################################################################################################
# human-readable archive sizes, switching from MB to GB above 1 GiB
GIB = 1024**3
MIB = 1024**2


def human_size(num_bytes: Optional[int]) -> str:
    if not isinstance(num_bytes, int) or isinstance(num_bytes, bool) or num_bytes <= 0:
        return "unknown"
    if num_bytes > GIB:
        return f"{num_bytes / GIB:.2f} GB"
    return f"{num_bytes / MIB:.2f} MB"


###################################################################################################
# determine if a program/script exists and is executable in the system path
def which(cmd, debug=False):
    result = any(
        os.access(os.path.join(path, cmd), os.X_OK) for path in os.environ.get("PATH", "").split(os.pathsep) if path
    )
    if debug:
        eprint(f"which {cmd} returned {result}")
    return result
