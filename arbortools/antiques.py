"""Cheapest way to collect one antique of every kind."""

from __future__ import annotations

from collections.abc import Iterable


def cheapest_collection_cost(items: Iterable[int], prices: Iterable[int]) -> int:
    """Sum over item kinds of the lowest price offered for that kind.

    ``items[i]`` is the kind sold at ``prices[i]``.  Raises ``ValueError``
    when the two listings differ in length.
    """
    kinds = list(items)
    costs = list(prices)
    if len(kinds) != len(costs):
        raise ValueError("items and prices must have the same length")
    cheapest: dict[int, int] = {}
    for kind, price in zip(kinds, costs):
        if kind not in cheapest or price < cheapest[kind]:
            cheapest[kind] = price
    return sum(cheapest.values())