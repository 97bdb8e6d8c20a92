"""Scale a train's acceleration/deceleration capability (``Zug@APBeschl``)."""

import logging
import xml.etree.ElementTree as ET
from typing import Optional

from zsw.consist import has_locomotive
from zsw.document import require_attribute, train_element
from zsw.errors import MissingTag, ParseError, context

# Friction needed by each traction type to reach its nominal acceleration
DEFAULT_FRICTION = 0.4
DEFAULT_LOC_NEEDED_FRICTION = 0.4
DEFAULT_MU_NEEDED_FRICTION = 0.25


def friction_multiplier(friction: float, needed: float, multiplier: Optional[float] = None) -> float:
    """
    Factor for one traction type: ``min(friction / needed, 1.0) * multiplier``.

    The friction ratio is capped at 1.0 before the global multiplier is
    applied, so good rails never boost a train.
    """
    ratio = min(friction / needed, 1.0)
    if multiplier is not None:
        ratio *= multiplier
    return ratio


def modify_acceleration(root: ET.Element, loc_multiplier: float, mu_multiplier: float) -> float:
    """
    Multiply ``APBeschl`` by the factor matching the consist and return it.

    Locomotive-hauled trains use ``loc_multiplier``, multiple units
    ``mu_multiplier``.
    """
    zug = train_element(root)

    consist = zug.find("FahrzeugVarianten")
    if consist is None:
        raise MissingTag("FahrzeugVarianten")
    with context("classifying consist"):
        is_loc = has_locomotive(consist)

    with context("parsing APBeschl"):
        raw = require_attribute(zug, "APBeschl")
        try:
            value = float(raw)
        except ValueError as exc:
            raise ParseError(f"invalid number {raw!r}") from exc

    multiplier = loc_multiplier if is_loc else mu_multiplier
    new_value = multiplier * value
    zug.set("APBeschl", str(new_value))
    logging.debug(
        "APBeschl %s -> %s (%s, x%.4f)",
        raw, new_value, "locomotive" if is_loc else "multiple unit", multiplier,
    )
    return new_value
