"""Reading product datasets and aggregating their attributes."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable
from dataclasses import dataclass

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


@dataclass(frozen=True)
class Product:
    """One dataset row: ``attr_1`` is the price, ``attr_2`` the review score."""

    id: int
    label: str
    attr_1: int
    attr_2: int

    @property
    def price(self) -> int:
        return self.attr_1

    @property
    def review(self) -> int:
        return self.attr_2


@dataclass(frozen=True)
class LabelTotals:
    """Attribute sums of all products sharing one label."""

    attr1_sum: int = 0
    attr2_sum: int = 0


@dataclass(frozen=True)
class Summary:
    """Row count and attribute totals of a dataset."""

    rows: int
    total_attr_1: int
    total_attr_2: int


def _parse_int(token: str, line_no: int, column: str) -> int:
    """Read the leading integer of ``token``; trailing characters are ignored."""
    match = _INT_PREFIX.match(token)
    if match is None:
        raise ValueError(f"line {line_no}: {column} is not an integer: {token!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"line {line_no}: {column} is out of range: {token!r}")
    return value


def parse_products(lines: Iterable[str]) -> list[Product]:
    """Parse CSV lines ``id,label,attr_1,attr_2``; the first line is a header."""
    rows = iter(lines)
    next(rows, None)
    products = []
    for line_no, line in enumerate(rows, start=2):
        fields = line.rstrip("\n").split(",")
        if len(fields) < 4:
            raise ValueError(f"line {line_no}: expected 4 fields, got {len(fields)}")
        id_token, label, attr1_token, attr2_token = fields[:4]
        products.append(
            Product(
                id=_parse_int(id_token, line_no, "id"),
                label=label,
                attr_1=_parse_int(attr1_token, line_no, "attr_1"),
                attr_2=_parse_int(attr2_token, line_no, "attr_2"),
            )
        )
    return products


def read_products(path: str | os.PathLike[str]) -> list[Product]:
    """Read the products of a CSV file."""
    with open(path, encoding="utf-8", newline="") as handle:
        return parse_products(handle)


def totals_by_label(products: Iterable[Product]) -> dict[str, LabelTotals]:
    """Sum both attributes per label, in order of first appearance."""
    sums: dict[str, list[int]] = {}
    for product in products:
        entry = sums.setdefault(product.label, [0, 0])
        entry[0] += product.attr_1
        entry[1] += product.attr_2
    return {label: LabelTotals(a1, a2) for label, (a1, a2) in sums.items()}


def summarize(products: Iterable[Product]) -> Summary:
    """Count the products and total both attributes."""
    rows = total_1 = total_2 = 0
    for product in products:
        rows += 1
        total_1 += product.attr_1
        total_2 += product.attr_2
    return Summary(rows=rows, total_attr_1=total_1, total_attr_2=total_2)