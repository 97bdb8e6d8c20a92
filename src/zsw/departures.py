"""Inflate dwell times at every stop that has both arrival and departure."""

import xml.etree.ElementTree as ET

from zsw.document import timetable_entries, train_element
from zsw.errors import context
from zsw.timestamp import Timestamp

DEFAULT_FACTOR = 1.0
DEFAULT_MAX_DELAY_MINUTES = 6.0


def adjust_departures(root: ET.Element, factor: float, max_wait_seconds: float) -> int:
    """
    Push each ``Abf`` back by ``min(wait * factor, max_wait_seconds)``.

    The extra time is added to the original departure, not recomputed from
    the arrival. Returns the number of entries changed.
    """
    zug = train_element(root)
    changed = 0
    for entry in timetable_entries(zug):
        ank, abf = entry.get("Ank"), entry.get("Abf")
        if ank is None or abf is None:
            continue
        with context(f"adjusting departure {abf}"):
            arrival = Timestamp.parse(ank)
            departure = Timestamp.parse(abf)
            wait = departure - arrival
            extra = int(min(wait * factor, max_wait_seconds))
            entry.set("Abf", str(departure.add_seconds(extra)))
        changed += 1
    return changed
