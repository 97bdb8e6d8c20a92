"""
Read and write train (.trn) files.

Comments and processing instructions are kept in the tree so that content
the mutation steps never look at is written back unchanged.
"""

import os
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterator, Union

from zsw.errors import MissingAttribute, MissingTag, ParseError

PathLike = Union[str, Path]


def _parser() -> ET.XMLParser:
    builder = ET.TreeBuilder(insert_comments=True, insert_pis=True)
    return ET.XMLParser(target=builder)


def parse_string(text: str) -> ET.Element:
    parser = _parser()
    try:
        parser.feed(text)
        return parser.close()
    except ET.ParseError as exc:
        raise ParseError(f"malformed document: {exc}") from exc


def read_document(path: PathLike) -> ET.ElementTree:
    try:
        return ET.parse(str(path), parser=_parser())
    except ET.ParseError as exc:
        raise ParseError(f"malformed document {path}: {exc}") from exc


def write_document(tree: ET.ElementTree, path: PathLike) -> None:
    """Serialize next to ``path`` first, then swap the result in."""
    path = Path(path)
    staging = path.with_name(path.name + ".tmp")
    try:
        tree.write(str(staging), encoding="utf-8", xml_declaration=True)
        os.replace(staging, path)
    finally:
        if staging.exists():
            staging.unlink()


def to_string(root: ET.Element) -> str:
    return ET.tostring(root, encoding="unicode")


def train_element(root: ET.Element) -> ET.Element:
    """Return the ``Zug`` child of the document root."""
    zug = root.find("Zug")
    if zug is None:
        raise MissingTag("Zug")
    return zug


def timetable_entries(zug: ET.Element) -> Iterator[ET.Element]:
    """``FahrplanEintrag`` children of ``Zug`` in schedule order."""
    return iter(zug.findall("FahrplanEintrag"))


def require_attribute(element: ET.Element, name: str) -> str:
    value = element.get(name)
    if value is None:
        raise MissingAttribute(element.tag, name)
    return value
