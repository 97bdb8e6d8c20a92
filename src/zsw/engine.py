"""
Per-file mutation pipeline.

Steps run in a fixed order (acceleration, entry delay, departures), each
only when the configuration asks for it. The first failing step aborts the
file and nothing is written.
"""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import List

import numpy as np

from zsw.acceleration import modify_acceleration
from zsw.config import WeatherConfig
from zsw.delay import delay_entry
from zsw.departures import adjust_departures
from zsw.document import read_document, write_document
from zsw.errors import context


def mutate_document(root: ET.Element, config: WeatherConfig, rng: np.random.Generator) -> List[str]:
    """Apply the configured steps to ``root`` in place; returns the steps run."""
    steps = []

    if config.modifies_acceleration:
        with context("applying multiplier"):
            modify_acceleration(root, config.locomotive_multiplier, config.multiple_unit_multiplier)
        steps.append("acceleration")

    if config.delays_entry:
        with context("delaying entry"):
            delay_entry(root, config.delay_model(), rng)
        steps.append("delay")

    if config.adjusts_departures:
        with context("adjusting departures"):
            adjust_departures(root, config.departures_delay_factor, config.max_wait_seconds)
        steps.append("departures")

    return steps


def modify_file(path: Path, config: WeatherConfig, rng: np.random.Generator) -> List[str]:
    with context(f"reading {path.name}"):
        tree = read_document(path)
    steps = mutate_document(tree.getroot(), config, rng)
    write_document(tree, path)
    logging.info("modified %s (%s)", path, ", ".join(steps) or "no changes")
    return steps
