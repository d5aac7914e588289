"""Skyline queries over products, in several maintenance strategies."""

from __future__ import annotations

import bisect
from collections import deque
from collections.abc import Iterable

from skylineq.dataset import Product


def dominates(a: Product, b: Product) -> bool:
    """Strict dominance: ``a`` is no dearer and no worse reviewed, and better in one."""
    return (a.attr_1 <= b.attr_1 and a.attr_2 >= b.attr_2) and (
        a.attr_1 < b.attr_1 or a.attr_2 > b.attr_2
    )


def weakly_dominates(a: Product, b: Product) -> bool:
    """Dominance that also holds between equal products."""
    return a.attr_1 <= b.attr_1 and a.attr_2 >= b.attr_2


def dominates_low(a: Product, b: Product) -> bool:
    """Strict dominance where lower values are better on both attributes."""
    return (a.attr_1 <= b.attr_1 and a.attr_2 <= b.attr_2) and (
        a.attr_1 < b.attr_1 or a.attr_2 < b.attr_2
    )


def skyline_array(products: Iterable[Product]) -> list[Product]:
    """Block-nested-loop skyline; survivors keep their order, newcomers go last."""
    skyline: list[Product] = []
    for product in products:
        if any(dominates(s, product) for s in skyline):
            continue
        skyline = [s for s in skyline if not dominates(product, s)]
        skyline.append(product)
    return skyline


def skyline_linked_list(products: Iterable[Product]) -> list[Product]:
    """Skyline under weak dominance, so duplicates of a member are dropped."""
    skyline: list[Product] = []
    for product in products:
        if any(weakly_dominates(s, product) for s in skyline):
            continue
        skyline = [s for s in skyline if not weakly_dominates(product, s)]
        skyline.append(product)
    return skyline


def skyline_map(products: Iterable[Product]) -> list[Product]:
    """Skyline kept as a price-ordered frontier.

    A product is rejected only when a strictly cheaper frontier entry reviews at
    least as well. Accepted products are reported in acceptance order and are
    never withdrawn, even if a later product supersedes them on the frontier.
    """
    prices: list[int] = []
    reviews: list[int] = []
    accepted: list[Product] = []
    for product in products:
        pos = bisect.bisect_left(prices, product.attr_1)
        if pos > 0 and reviews[pos - 1] >= product.attr_2:
            continue
        while pos < len(prices) and reviews[pos] <= product.attr_2:
            del prices[pos]
            del reviews[pos]
        if pos < len(prices) and prices[pos] == product.attr_1:
            reviews[pos] = product.attr_2
        else:
            prices.insert(pos, product.attr_1)
            reviews.insert(pos, product.attr_2)
        accepted.append(product)
    return accepted


def skyline_queue(products: Iterable[Product]) -> list[Product]:
    """Skyline taking candidates first-in first-out from a queue."""
    pending = deque(products)
    skyline: list[Product] = []
    while pending:
        candidate = pending.popleft()
        if any(dominates(s, candidate) for s in skyline):
            continue
        skyline = [s for s in skyline if not dominates(candidate, s)]
        skyline.append(candidate)
    return skyline


def skyline_stack(products: Iterable[Product]) -> list[Product]:
    """Skyline with lower-is-better attributes, kept on a stack.

    Each accepted candidate sinks to the bottom of the stack; the result is
    read from the top down.
    """
    stack: list[Product] = []  # bottom first
    for candidate in products:
        kept = [s for s in stack if not dominates_low(candidate, s)]
        if any(dominates_low(s, candidate) for s in stack):
            stack = kept
        else:
            stack = [candidate, *kept]
    return stack[::-1]