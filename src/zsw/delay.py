"""
Entry delay for a train's first scheduled arrival.

Two independent sources are summed (minutes):

- burst: with probability ``p``, ``amplitude * (exp(lambda * r) - 1)`` for a
  uniform ``r``; rare but potentially large disruptions
- ambient: normally distributed with the given mean and deviation
"""

import logging
import math
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Optional

import numpy as np

from zsw.document import require_attribute, timetable_entries, train_element
from zsw.errors import InvalidDistributionParameters, MissingAttribute, MissingEntry, context
from zsw.timestamp import Timestamp

DEFAULT_AMPLITUDE = 360.0
DEFAULT_LAMBDA = 3.0
DEFAULT_AMBIENT_DEVIATION = 5.0


@dataclass
class DelayModel:
    probability: Optional[float] = None
    amplitude: float = DEFAULT_AMPLITUDE
    lam: float = DEFAULT_LAMBDA
    ambient_mean: Optional[float] = None
    ambient_deviation: float = DEFAULT_AMBIENT_DEVIATION
    deny_early: bool = False

    @property
    def active(self) -> bool:
        return self.probability is not None or self.ambient_mean is not None

    def burst_minutes(self, rng: np.random.Generator) -> float:
        if self.probability is None:
            return 0.0
        if rng.random() >= self.probability:
            return 0.0
        try:
            growth = math.exp(self.lam * rng.random())
        except OverflowError as exc:
            raise InvalidDistributionParameters(f"delay lambda {self.lam} is too large") from exc
        return self.amplitude * (growth - 1.0)

    def ambient_minutes(self, rng: np.random.Generator) -> float:
        if self.ambient_mean is None:
            return 0.0
        if self.ambient_deviation <= 0:
            raise InvalidDistributionParameters(
                f"standard deviation must be positive, got {self.ambient_deviation}"
            )
        return float(rng.normal(self.ambient_mean, self.ambient_deviation))

    def sample_seconds(self, rng: np.random.Generator) -> int:
        """Draw one delay in whole seconds, truncating fractions."""
        minutes = self.burst_minutes(rng) + self.ambient_minutes(rng)
        if self.deny_early:
            minutes = max(minutes, 0.0)
        seconds = minutes * 60
        if not math.isfinite(seconds):
            raise InvalidDistributionParameters(f"sampled delay is not finite: {minutes} min")
        return int(seconds)


def first_arrival_entry(zug: ET.Element) -> ET.Element:
    """First ``FahrplanEintrag`` carrying ``Ank``, in document order."""
    found = False
    for entry in timetable_entries(zug):
        found = True
        if entry.get("Ank") is not None:
            return entry
    if not found:
        raise MissingEntry()
    raise MissingAttribute("FahrplanEintrag", "Ank")


def apply_entry_delay(root: ET.Element, seconds: int) -> Timestamp:
    zug = train_element(root)
    entry = first_arrival_entry(zug)
    with context("parsing Ank"):
        arrival = Timestamp.parse(require_attribute(entry, "Ank"))
    with context(f"adding {seconds}s to {arrival}"):
        delayed = arrival.add_seconds(seconds)
    entry.set("Ank", str(delayed))
    return delayed


def delay_entry(root: ET.Element, model: DelayModel, rng: np.random.Generator) -> int:
    """Sample a delay and shift the entry arrival by it; returns the seconds."""
    seconds = model.sample_seconds(rng)
    if seconds == 0:
        logging.debug("entry delay rounds to zero, nothing to apply")
        return 0
    delayed = apply_entry_delay(root, seconds)
    logging.debug("entry delayed by %ss to %s", seconds, delayed)
    return seconds
