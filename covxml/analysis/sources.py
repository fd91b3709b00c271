"""
Locating recorded source files on the reporting machine.

A coverage snapshot records the paths of the measured files as they were on
the machine that ran the tests. When the snapshot is reported elsewhere
(a CI agent, a different checkout) those paths do not exist, and the source
text has to be found under the symbol search paths instead.
"""

import os
import re
from typing import Sequence

# Recorded paths may come from either Windows or POSIX test machines
_SEPARATORS = re.compile(r"[\\/]+")


def path_suffixes(recorded: str) -> list[list[str]]:
    """
    Split a recorded path into its suffixes, longest first.

    "/agent/work/pkg/mod.py" gives
    [["agent", "work", "pkg", "mod.py"], ["work", "pkg", "mod.py"], ["pkg", "mod.py"], ["mod.py"]]
    """
    parts = [p for p in _SEPARATORS.split(recorded) if p]
    return [parts[i:] for i in range(len(parts))]


def locate_source(recorded: str, search_paths: Sequence[str]) -> str:
    """
    Return the path to use for a recorded source file.

    Paths that exist as recorded are returned unchanged. Otherwise the
    suffixes of the recorded path are tried from longest to shortest, each
    against the search directories in order, and the first existing file is
    returned as an absolute path. If nothing matches, the recorded path is
    returned unchanged.
    """
    if os.path.exists(recorded) or not search_paths:
        return recorded

    for suffix in path_suffixes(recorded):
        for directory in search_paths:
            candidate = os.path.join(directory, *suffix)
            if os.path.isfile(candidate):
                return os.path.abspath(candidate)

    return recorded
