"""CBSA border wait time table extraction.

The CBSA page publishes one row per office:

    office | commercial flow | travellers flow | <time datetime="...">... PDT</time>

Only rows announced in a Pacific time zone are kept. Two interchangeable parsers
implement the same row contract: a selectolax DOM parser and a BeautifulSoup
tree walker. `default_table_parser()` picks one based on what is installed.
"""

from __future__ import annotations

import importlib
import re
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Iterable, Iterator, Optional

from borderwait.jobs.ingest.errors import StructuralError
from borderwait.jobs.ingest.types import CanadaBorderCrossingTimes
from borderwait.jobs.ingest.utils.flow import check_flow_value
from borderwait.jobs.ingest.utils.time import extract_time_zone, to_announced_zone

if TYPE_CHECKING:
    from bs4 import Tag
    from selectolax.lexbor import LexborNode

CBSA_TABLE_ID = "bwttaf"
CELLS_PER_ROW = 4

# module the DOM strategy is built on
DOM_BACKEND = "selectolax.lexbor"

_WS_RE = re.compile(r"\s+")


def _clean(text: Optional[str]) -> str:
    return _WS_RE.sub(" ", text or "").strip()


class TableParser(ABC):
    """Turns the CBSA page (or an already-parsed document) into crossing records."""

    def __init__(self, table_id: str = CBSA_TABLE_ID):
        self.table_id = table_id

    def extract(self, markup: Any) -> list[CanadaBorderCrossingTimes]:
        table = self._find_table(markup)
        if table is None:
            raise StructuralError(f"table#{self.table_id}", f"Table #{self.table_id} not found in markup")
        return list(self._iter_records(table))

    def _iter_records(self, table: Any) -> Iterator[CanadaBorderCrossingTimes]:
        for row in self._body_rows(table):
            cells = self._cells(row)
            if len(cells) < CELLS_PER_ROW:
                continue

            stamp = self._time_stamp(cells[3])
            if stamp is None:
                continue
            time_attr, time_text = stamp

            zone = extract_time_zone(time_text)
            if zone is None or not zone.is_pacific:
                continue
            updated = to_announced_zone(time_attr, zone)
            if updated is None:
                continue

            yield CanadaBorderCrossingTimes(
                cbsa_office=self._office_name(cells[0]),
                commercial_flow=check_flow_value(_clean(self._text(cells[1]))),
                travellers_flow=check_flow_value(_clean(self._text(cells[2]))),
                updated=updated,
            )

    def _body_rows(self, table: Any) -> Iterator[Any]:
        # own rows only, so rows of a table nested in a cell are skipped
        for child in self._children(table):
            tag = self._tag(child)
            if tag == "tr":
                yield child
            elif tag == "tbody":
                yield from (tr for tr in self._children(child) if self._tag(tr) == "tr")

    def _office_name(self, cell: Any) -> str:
        fragments = [_clean(self._text(child)) for child in self._children(cell)]
        fragments = [f for f in fragments if f]
        if not fragments:
            # office written as bare text, without wrapping elements
            return _clean(self._text(cell))
        return "\n".join(fragments)

    @abstractmethod
    def _find_table(self, markup: Any) -> Any:
        """Return the table node, or None."""

    @abstractmethod
    def _tag(self, node: Any) -> str:
        ...

    @abstractmethod
    def _cells(self, row: Any) -> list[Any]:
        ...

    @abstractmethod
    def _children(self, cell: Any) -> Iterable[Any]:
        """Child elements of a node, text nodes excluded."""

    @abstractmethod
    def _text(self, node: Any) -> str:
        ...

    @abstractmethod
    def _time_stamp(self, cell: Any) -> Optional[tuple[Optional[str], str]]:
        """(datetime attribute, human-readable text) of the cell's time element."""


class SelectolaxTableParser(TableParser):
    """DOM strategy: CSS selectors over a selectolax (lexbor) document."""

    def _find_table(self, markup: Any) -> Optional["LexborNode"]:
        from selectolax.lexbor import LexborHTMLParser, LexborNode

        if isinstance(markup, (str, bytes)):
            markup = LexborHTMLParser(markup)

        if isinstance(markup, LexborNode) and markup.tag == "table":
            if markup.attributes.get("id") == self.table_id:
                return markup
        return markup.css_first(f'table[id="{self.table_id}"]')

    def _tag(self, node: "LexborNode") -> str:
        return node.tag

    def _cells(self, row: "LexborNode") -> list["LexborNode"]:
        return [c for c in row.iter(include_text=False) if c.tag in ("td", "th")]

    def _children(self, cell: "LexborNode") -> Iterator["LexborNode"]:
        return cell.iter(include_text=False)

    def _text(self, node: "LexborNode") -> str:
        return node.text(deep=True, separator=" ")

    def _time_stamp(self, cell: "LexborNode") -> Optional[tuple[Optional[str], str]]:
        time_node = cell.css_first("time")
        if time_node is None:
            return None
        return time_node.attributes.get("datetime"), self._text(time_node)


class SoupTableParser(TableParser):
    """Tree-walking strategy: BeautifulSoup over the stdlib html.parser."""

    def _find_table(self, markup: Any) -> Optional["Tag"]:
        from bs4 import BeautifulSoup

        if isinstance(markup, (str, bytes)):
            markup = BeautifulSoup(markup, "html.parser")

        if markup.name == "table" and markup.get("id") == self.table_id:
            return markup
        return markup.find("table", id=self.table_id)

    def _tag(self, node: "Tag") -> str:
        return node.name

    def _cells(self, row: "Tag") -> list["Tag"]:
        return row.find_all(["td", "th"], recursive=False)

    def _children(self, cell: "Tag") -> list["Tag"]:
        return cell.find_all(True, recursive=False)

    def _text(self, node: "Tag") -> str:
        return node.get_text(" ")

    def _time_stamp(self, cell: "Tag") -> Optional[tuple[Optional[str], str]]:
        time_tag = cell.find("time")
        if time_tag is None:
            return None
        return time_tag.get("datetime"), self._text(time_tag)


def dom_backend_available() -> bool:
    try:
        importlib.import_module(DOM_BACKEND)
    except ImportError:
        return False
    return True


def default_table_parser(table_id: str = CBSA_TABLE_ID) -> TableParser:
    if dom_backend_available():
        return SelectolaxTableParser(table_id)
    return SoupTableParser(table_id)


def parse(markup: Any, table_id: str = CBSA_TABLE_ID) -> list[CanadaBorderCrossingTimes]:
    """Extract Pacific-zone crossing times from the CBSA page, in document order."""
    return default_table_parser(table_id).extract(markup)
