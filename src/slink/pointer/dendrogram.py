"""Conversions from the pointer representation to an explicit dendrogram."""

from __future__ import annotations

from collections.abc import Hashable

import numpy as np

from slink.pointer.model import PointerModel


def to_linkage(model: PointerModel) -> np.ndarray:
    """Generate a scipy-compatible linkage matrix.

    Objects are visited by increasing merge level. Each visit joins the
    current node of the object with the current node of its pointer. The
    sort is stable, so among equal levels the earlier object, whose pointer
    is always later, is merged first.

    Args:
        model: Finished pointer representation

    Returns:
        Array of shape (n - 1, 4): ``[node_a, node_b, level, size]`` per merge,
        where node ids >= n refer to the cluster formed in row ``id - n``
    """
    n = len(model)
    Z = np.zeros((max(n - 1, 0), 4), dtype=np.float64)
    if n < 2:
        return Z

    pi = model.pointers
    lam = model.levels
    order = np.argsort(lam, kind="stable")
    node_ids = np.arange(n, dtype=np.int64)
    sizes = np.ones(2 * n - 1, dtype=np.int64)

    for row, leaf in enumerate(order[: n - 1]):
        target = pi[leaf]
        a, b = node_ids[leaf], node_ids[target]
        Z[row, 0], Z[row, 1] = min(a, b), max(a, b)
        Z[row, 2] = lam[leaf]
        sizes[n + row] = sizes[a] + sizes[b]
        Z[row, 3] = sizes[n + row]
        node_ids[target] = n + row

    return Z


def cophenetic_distance(model: PointerModel, a: Hashable, b: Hashable) -> float:
    """Single-link level at which ``a`` and ``b`` first share a cluster.

    Walks both pointer chains to the object where they meet; the answer is
    the largest merge level passed on the way.
    """
    if a == b:
        model.index_of(a)
        return 0.0
    pi = model.pointers
    lam = model.levels

    def chain(index: int) -> dict[int, float]:
        # Highest level crossed before reaching each index on the chain.
        reached = {index: 0.0}
        level = 0.0
        while pi[index] != index:
            level = max(level, float(lam[index]))
            index = int(pi[index])
            reached[index] = level
        return reached

    from_a = chain(model.index_of(a))
    index = model.index_of(b)
    level = 0.0
    while index not in from_a:
        level = max(level, float(lam[index]))
        index = int(pi[index])
    return max(level, from_a[index])
