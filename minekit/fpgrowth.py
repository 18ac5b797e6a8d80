"""Frequent itemsets and association rules by the FP-growth algorithm."""

from __future__ import annotations

import argparse
import math
from collections import Counter
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

from minekit.apriori import AssociationRule

Itemset = tuple[str, ...]
FrequentItemsets = list[tuple[Itemset, int]]

SAMPLE_TRANSACTIONS: tuple[Itemset, ...] = tuple(
    tuple(items)
    for items in (
        "abcd",
        "bcd",
        "aefgh",
        "bcdegj",
        "bcdef",
        "afg",
        "aij",
        "abeh",
        "fghij",
        "efh",
    )
)


class FPNode:
    """A node of an FP-tree; the root carries no item."""

    def __init__(self, item: str | None = None, parent: FPNode | None = None):
        self.item = item
        self.count = 0
        self.parent = parent
        self.children: dict[str, FPNode] = {}
        self.node_link: FPNode | None = None

    def increment(self, count: int) -> None:
        """Add ``count`` to this node's count."""
        self.count += count

    def prefix_path(self) -> list[str]:
        """Items on the way from the root down to this node, excluding it."""
        path: list[str] = []
        node = self.parent
        while node is not None:
            if node.item is not None:
                path.append(node.item)
            node = node.parent
        path.reverse()
        return path


@dataclass
class _HeaderEntry:
    support: int
    head: FPNode | None = None
    tail: FPNode | None = field(default=None, repr=False)

    def link(self, node: FPNode) -> None:
        if self.tail is None:
            self.head = node
        else:
            self.tail.node_link = node
        self.tail = node

    def nodes(self) -> Iterator[FPNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.node_link


class FPTree:
    """A prefix tree of transactions with a header table linking equal items."""

    def __init__(self) -> None:
        self.root = FPNode()
        self.header_table: dict[str, _HeaderEntry] = {}

    def _set_header(self, counts: dict[str, int], min_support: int) -> None:
        self.header_table = {
            item: _HeaderEntry(count) for item, count in counts.items() if count >= min_support
        }

    def _ordered(self, items: Iterable[str]) -> list[str]:
        kept = [item for item in items if item in self.header_table]
        return sorted(kept, key=lambda item: -self.header_table[item].support)

    def add_transaction(self, transaction: Iterable[str], count: int) -> None:
        """Insert ``transaction`` along a path from the root, adding ``count`` to each node."""
        node = self.root
        for item in transaction:
            child = node.children.get(item)
            if child is None:
                entry = self.header_table.get(item)
                if entry is None:
                    raise ValueError(f"item {item!r} is not in the header table")
                child = FPNode(item, node)
                node.children[item] = child
                entry.link(child)
            child.increment(count)
            node = child

    def build(self, transactions: Iterable[Iterable[str]], min_support: int) -> None:
        """Fill the tree from ``transactions``, keeping items seen at least ``min_support`` times."""
        baskets = [list(t) for t in transactions]
        counts: Counter[str] = Counter(item for basket in baskets for item in basket)
        self._set_header(counts, min_support)
        for basket in baskets:
            ordered = self._ordered(basket)
            if ordered:
                self.add_transaction(ordered, 1)

    def mine(self, min_support: int) -> FrequentItemsets:
        """Every frequent itemset in the tree with its support count."""
        result: FrequentItemsets = []
        self._grow((), min_support, result)
        return result

    def _grow(self, prefix: Itemset, min_support: int, result: FrequentItemsets) -> None:
        by_support = sorted(
            self.header_table.items(), key=lambda pair: (pair[1].support, pair[0])
        )
        for item, entry in by_support:
            new_prefix = (*prefix, item)
            result.append((new_prefix, entry.support))

            pattern_base = [
                (path, node.count)
                for node in entry.nodes()
                if (path := node.prefix_path())
            ]
            if not pattern_base:
                continue

            conditional = FPTree()
            counts: Counter[str] = Counter()
            for path, count in pattern_base:
                for path_item in path:
                    counts[path_item] += count
            conditional._set_header(counts, min_support)

            for path, count in pattern_base:
                ordered = conditional._ordered(path)
                if ordered:
                    conditional.add_transaction(ordered, count)

            if conditional.header_table:
                conditional._grow(new_prefix, min_support, result)

    def _node_lines(self, node: FPNode, depth: int) -> Iterator[str]:
        indent = "    " * depth
        if node.item is None:
            yield f"{indent}Root"
        else:
            yield f"{indent}Item: {node.item}, Count: {node.count}"
        for item in sorted(node.children):
            yield from self._node_lines(node.children[item], depth + 1)

    def __str__(self) -> str:
        lines = ["FP-Tree Structure:", *self._node_lines(self.root, 0), "", "Header Table:"]
        for item in sorted(self.header_table):
            entry = self.header_table[item]
            line = f"Item {item}: Support={entry.support}"
            if entry.head is not None:
                links = "-> ".join(f"{node.item}:{node.count} " for node in entry.nodes())
                line += f", Links: {links}"
            lines.append(line)
        return "\n".join(lines) + "\n"


def generate_all_subsets(itemset: Sequence[str]) -> list[Itemset]:
    """Every subset of ``itemset``, the empty and full ones included, keeping item order."""
    n = len(itemset)
    return [
        tuple(item for bit, item in enumerate(itemset) if mask >> bit & 1)
        for mask in range(1 << n)
    ]


def generate_rules(
    frequent_itemsets: Iterable[tuple[Sequence[str], int]], min_confidence: float
) -> list[AssociationRule]:
    """Rules from the frequent itemsets whose confidence reaches ``min_confidence``."""
    frequent = [(tuple(itemset), support) for itemset, support in frequent_itemsets]
    support_map = dict(frequent)
    rules: list[AssociationRule] = []
    for itemset, support in frequent:
        if len(itemset) <= 1:
            continue
        for subset in generate_all_subsets(itemset):
            if not subset or len(subset) == len(itemset):
                continue
            consequent = tuple(item for item in itemset if item not in subset)
            if not consequent:
                continue
            subset_support = support_map.get(subset, 0)
            if subset_support == 0:
                continue
            confidence = support / subset_support
            if confidence >= min_confidence:
                rules.append(AssociationRule(subset, consequent, confidence))
    return rules


def _run(
    transactions: Iterable[Iterable[str]], min_support: float, min_confidence: float
) -> tuple[FPTree, FrequentItemsets, list[AssociationRule]]:
    baskets = [list(t) for t in transactions]
    min_count = math.ceil(min_support * len(baskets))
    tree = FPTree()
    tree.build(baskets, min_count)
    frequent = tree.mine(min_count)
    return tree, frequent, generate_rules(frequent, min_confidence)


def fp_growth(
    transactions: Iterable[Iterable[str]], min_support: float, min_confidence: float
) -> tuple[FrequentItemsets, list[AssociationRule]]:
    """Mine ``transactions``; ``min_support`` is a fraction of the transaction count."""
    _, frequent, rules = _run(transactions, min_support, min_confidence)
    return frequent, rules


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run FP-growth on the sample transactions.")
    parser.add_argument("--min-support", type=float, default=0.4)
    parser.add_argument("--min-confidence", type=float, default=0.75)
    args = parser.parse_args(argv)

    transactions = list(SAMPLE_TRANSACTIONS)
    total = len(transactions)
    tree, frequent, rules = _run(transactions, args.min_support, args.min_confidence)
    print(tree)

    print("Frequent Itemsets (with support):")
    for number, (itemset, support) in enumerate(frequent, start=1):
        percentage = support / total * 100.0
        print(f"{number}. {list(itemset)} (support: {support}/{total} = {percentage:.1f}%)")

    print("\nAssociation Rules:")
    for number, rule in enumerate(rules, start=1):
        print(
            f"{number}. {list(rule.antecedent)} => {list(rule.consequent)} "
            f"(confidence: {rule.confidence * 100.0:.2f}%)"
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())