"""Readers for TSPLIB coordinate files and `name: value` reference tables."""
from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Dict, List, Union

from .tsp import TSPInstance

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def instance_key(path: PathLike) -> str:
    """File name with any extension removed ("berlin52.tsp" -> "berlin52")."""
    return Path(path).name.split(".", 1)[0]


def list_tsp_files(folder: PathLike) -> List[str]:
    return sorted(str(p) for p in Path(folder).iterdir() if p.suffix == ".tsp")


def parse_tsp_file(path: PathLike) -> TSPInstance:
    """Read the NODE_COORD_SECTION of a TSPLIB file.

    Lines before the section are ignored, reading stops at EOF, and
    coordinate lines that do not parse as `id x y` are skipped.
    """
    ids, coords = [], []
    in_section = False
    with open(path, "r", errors="replace") as f:
        for lineno, line in enumerate(f, start=1):
            if "NODE_COORD_SECTION" in line:
                in_section = True
                continue
            if "EOF" in line:
                break
            if not in_section:
                continue
            parts = line.split()
            try:
                node_id, x, y = int(parts[0]), float(parts[1]), float(parts[2])
            except (IndexError, ValueError):
                if parts:
                    logger.debug("%s:%d: skipping malformed coordinate line %r", path, lineno, line.rstrip())
                continue
            ids.append(node_id)
            coords.append((x, y))
    return TSPInstance(coords=coords, name=instance_key(path), ids=ids)


def read_solutions(path: PathLike) -> Dict[str, float]:
    """Map instance name (extension stripped) -> reference tour length."""
    table = {}
    with open(path, "r", errors="replace") as f:
        for line in f:
            name, sep, value = line.partition(":")
            name = name.strip()
            if not sep or not name or " " in name:
                continue
            try:
                table[instance_key(name)] = float(value.split()[0])
            except (IndexError, ValueError):
                logger.debug("skipping malformed solution line %r", line.rstrip())
    return table
