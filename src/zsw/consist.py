"""
Consist inspection: does a train's vehicle composition contain a locomotive?

A ``FahrzeugVarianten`` element holds vehicle references (``Datei``),
vehicle infos wrapping one ``Datei`` (``FahrzeugInfo``) and nested variant
groups (``FahrzeugVarianten``). Nothing else is allowed at any level.
"""

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Iterator, List, Union

from zsw.errors import MissingChild, ParseError, UnrecognizedVariant
from zsw.document import require_attribute

LOCOMOTIVE_MARKER = "lok"


@dataclass
class VehicleRef:
    filename: str

    @property
    def is_locomotive(self) -> bool:
        return LOCOMOTIVE_MARKER in self.filename


@dataclass
class VehicleInfo:
    vehicle: VehicleRef


@dataclass
class NestedGroup:
    members: List["ConsistPart"] = field(default_factory=list)


ConsistPart = Union[VehicleRef, VehicleInfo, NestedGroup]


def _vehicle_ref(element: ET.Element) -> VehicleRef:
    return VehicleRef(require_attribute(element, "Dateiname"))


def parse_part(element: ET.Element) -> ConsistPart:
    if element.tag == "Datei":
        return _vehicle_ref(element)
    if element.tag == "FahrzeugInfo":
        files = element.findall("Datei")
        if not files:
            raise MissingChild("FahrzeugInfo", "Datei")
        if len(files) > 1:
            raise ParseError(f"'FahrzeugInfo' holds {len(files)} 'Datei' children, expected one")
        return VehicleInfo(_vehicle_ref(files[0]))
    if element.tag == "FahrzeugVarianten":
        return parse_group(element)
    raise UnrecognizedVariant(str(element.tag))


def _elements(element: ET.Element) -> Iterator[ET.Element]:
    # comments and processing instructions carry a function as tag
    return (child for child in element if isinstance(child.tag, str))


def parse_group(element: ET.Element) -> NestedGroup:
    return NestedGroup([parse_part(child) for child in _elements(element)])


def contains_locomotive(part: ConsistPart) -> bool:
    if isinstance(part, VehicleRef):
        return part.is_locomotive
    if isinstance(part, VehicleInfo):
        return part.vehicle.is_locomotive
    return any(contains_locomotive(member) for member in part.members)


def has_locomotive(consist: ET.Element) -> bool:
    """
    Walk ``consist`` in document order and stop at the first locomotive.

    Children are classified as they are reached, so an unknown element
    behind the first locomotive is never looked at.
    """
    for child in _elements(consist):
        if child.tag == "FahrzeugVarianten":
            if has_locomotive(child):
                return True
        elif contains_locomotive(parse_part(child)):
            return True
    return False
