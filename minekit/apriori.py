"""Frequent itemsets and association rules by the Apriori algorithm."""

from __future__ import annotations

import argparse
import math
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

Itemset = tuple[str, ...]

SAMPLE_TRANSACTIONS: tuple[frozenset[str], ...] = tuple(
    frozenset(items)
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


@dataclass(frozen=True)
class AssociationRule:
    """A rule ``antecedent => consequent`` with its confidence."""

    antecedent: Itemset
    consequent: Itemset
    confidence: float


def generate_candidates(l_prev: Iterable[Sequence[str]], k: int) -> list[Itemset]:
    """Join frequent ``(k-1)``-itemsets into ``k``-candidates, pruning by subsets."""
    if k < 2:
        raise ValueError("candidates can only be generated for k >= 2")
    previous = [tuple(itemset) for itemset in l_prev]
    known = set(previous)
    result: list[Itemset] = []
    for idx, p in enumerate(previous):
        for q in previous[idx + 1:]:
            if len(p) < k - 1 or len(q) < k - 1:
                continue
            if p[: k - 2] != q[: k - 2] or p[k - 2] == q[k - 2]:
                continue
            union = tuple(sorted(set(p) | set(q)))
            if len(union) != k:
                continue
            if all(union[:i] + union[i + 1:] in known for i in range(k)):
                result.append(union)
    return result


def calculate_support(
    candidates: Iterable[Sequence[str]], transactions: Iterable[Iterable[str]]
) -> dict[Itemset, int]:
    """Number of transactions that contain each candidate."""
    baskets = [frozenset(t) for t in transactions]
    return {
        tuple(candidate): sum(1 for basket in baskets if set(candidate) <= basket)
        for candidate in candidates
    }


def get_frequent_itemsets(
    candidates: Iterable[Sequence[str]],
    support_counts: Mapping[Itemset, int],
    min_support: float,
    transaction_count: int,
) -> list[Itemset]:
    """Candidates whose count reaches ``ceil(min_support * transaction_count)``."""
    min_count = math.ceil(min_support * transaction_count)
    return [
        tuple(c) for c in candidates if support_counts.get(tuple(c), 0) >= min_count
    ]


def generate_all_subsets(itemset: Sequence[str]) -> list[Itemset]:
    """Every non-empty proper subset of ``itemset``, keeping its item order."""
    n = len(itemset)
    return [
        tuple(item for bit, item in enumerate(itemset) if mask >> bit & 1)
        for mask in range(1, (1 << n) - 1)
    ]


def generate_rules(
    frequent_itemsets: Iterable[Sequence[str]],
    support_counts: Mapping[Itemset, int],
    min_confidence: float,
) -> list[AssociationRule]:
    """Rules from the frequent itemsets whose confidence reaches ``min_confidence``."""
    rules: list[AssociationRule] = []
    for itemset in map(tuple, frequent_itemsets):
        if len(itemset) <= 1:
            continue
        itemset_support = support_counts.get(itemset, 0)
        for antecedent in generate_all_subsets(itemset):
            consequent = tuple(sorted(set(itemset) - set(antecedent)))
            if not consequent:
                continue
            antecedent_support = support_counts.get(antecedent, 0)
            if antecedent_support == 0:
                continue
            confidence = itemset_support / antecedent_support
            if confidence >= min_confidence:
                rules.append(AssociationRule(antecedent, consequent, confidence))
    return rules


def apriori(
    transactions: Iterable[Iterable[str]], min_support: float, min_confidence: float
) -> tuple[list[Itemset], dict[Itemset, int], list[AssociationRule]]:
    """Mine ``transactions``.

    Returns the frequent itemsets in discovery order, the support count of
    every candidate that was counted, and the association rules.
    """
    baskets = [frozenset(t) for t in transactions]
    transaction_count = len(baskets)

    singletons = [(item,) for item in sorted(set().union(*baskets))]
    all_counts = calculate_support(singletons, baskets)
    l_prev = get_frequent_itemsets(singletons, all_counts, min_support, transaction_count)
    frequent = list(l_prev)

    k = 2
    while l_prev:
        candidates = generate_candidates(l_prev, k)
        if not candidates:
            break
        counts = calculate_support(candidates, baskets)
        l_k = get_frequent_itemsets(candidates, counts, min_support, transaction_count)
        frequent.extend(l_k)
        all_counts.update(counts)
        l_prev = l_k
        k += 1

    rules = generate_rules(frequent, all_counts, min_confidence)
    return frequent, all_counts, rules


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run Apriori on the sample transactions.")
    parser.add_argument("--min-support", type=float, default=0.4)
    parser.add_argument("--min-confidence", type=float, default=0.75)
    args = parser.parse_args(argv)

    transactions = list(SAMPLE_TRANSACTIONS)
    total = len(transactions)
    frequent, counts, rules = apriori(transactions, args.min_support, args.min_confidence)

    print("Frequent Itemsets (with support):")
    for number, itemset in enumerate(frequent, start=1):
        support = counts.get(itemset, 0)
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