"""
Isomorphism codes of connected functional digraphs.

A connected functional digraph is a cycle whose vertices are the roots of
rooted trees. Its code is the tuple of the tree codes read along the
cycle, taken in the rotation that is lexicographically least.

components(n) walks the codes of size n without ever comparing two
digraphs: it starts from the bare cycle of n vertices and moves from one
code to the next by merging runs of consecutive trees into a single tree,
falling back to unmerging the first proper tree when no merge is left.
Every code has a unique parent (its unmerge), so the walk is a traversal
of a tree of codes and visits each of them once.
"""
import logging

from funkdigen.trees import LEAF, join, subtrees, tree_alphabet, trees

logger = logging.getLogger(__name__)

COMPONENT_MEMO = {}


def component_size(code):
    return sum(t[0] for t in code)


def cycle(n):
    return (LEAF,) * n


def is_sorted(seq):
    return all(seq[i] <= seq[i + 1] for i in range(len(seq) - 1))


def is_min_rotation(seq):
    """Check whether seq is no larger than any of its rotations."""
    n = len(seq)
    for r in range(1, n):
        for i in range(n):
            a, b = seq[i], seq[(i + r) % n]
            if a > b:
                return False
            if a < b:
                break
    return True


def canonical_rotation(seq):
    seq = tuple(seq)
    if not seq:
        return seq
    return min(seq[r:] + seq[:r] for r in range(len(seq)))


def _has_unmerge(code, parent):
    # The first proper tree of code must come from a leaf of parent.
    i = 0
    while i < len(code) and code[i][0] == 1:
        i += 1
    return parent[i][0] == 1


def unmerge(code):
    """
    Split the first tree of code with more than one node into a leaf
    followed by its immediate subtrees.

    Returns (parent, l, r) where merging parent[l:r] gives back code, or
    None when code is a bare cycle.
    """
    l = 0
    while l < len(code) and code[l][0] == 1:
        l += 1
    if l == len(code):
        return None
    children = subtrees(code[l])
    parent = code[:l] + (LEAF,) + tuple(children) + code[l + 1:]
    return parent, l, l + 1 + len(children)


def merge(code, l, r):
    """Merge the trees code[l:r] into one tree rooted at code[l], if valid."""
    if code[l][0] != 1 or not is_sorted(code[l + 1:r]):
        return None
    merged = code[:l] + (join(code[l + 1:r]),) + code[r:]
    if not is_min_rotation(merged) or not _has_unmerge(merged, code):
        return None
    return merged


def next_merge(code, l, r):
    """First valid merge of code, trying r upwards, then l downwards."""
    while True:
        # Widen the run to the right first.
        while r <= len(code):
            merged = merge(code, l, r)
            if merged is not None:
                return merged
            r += 1
        if l == 0:
            return None
        # Then start one tree further left, with the shortest run again.
        l -= 1
        r = l + 2


def next_component(code):
    """Successor of code among the components of its size, or None."""
    # A child of code in the merge tree, if there is one.
    if len(code) >= 2:
        merged = next_merge(code, len(code) - 2, len(code))
        if merged is not None:
            return merged
    # Otherwise its next sibling, or the next sibling of an ancestor.
    result = unmerge(code)
    # Runs at most twice.
    while result is not None:
        parent, l, r = result
        merged = next_merge(parent, l, r + 1)
        if merged is not None:
            return merged
        result = unmerge(parent)
    return None


def components(n):
    """Generate the codes of all connected functional digraphs on n vertices."""
    if n < 0:
        raise ValueError(f"component size must be nonnegative, got {n}")
    if n == 0:
        return
    code = cycle(n)
    while code is not None:
        yield code
        code = next_component(code)


def component_pool(n):
    """All components of size n in generation order, computed only once."""
    if n not in COMPONENT_MEMO:
        logger.debug("building component pool for size %d", n)
        COMPONENT_MEMO[n] = list(components(n))
    return COMPONENT_MEMO[n]


def _necklaces(alphabet, k, budget, prefix, period):
    # prefix holds alphabet indices; it is always a prenecklace with the
    # given period, so candidates below prefix[t - period] are never tried.
    t = len(prefix)
    if t == k:
        # A prenecklace is a necklace iff its period divides its length.
        if budget == 0 and k % period == 0:
            yield prefix
        return
    # Every position after this one needs at least a leaf.
    room = budget - (k - t - 1)
    first = prefix[t - period] if t else 0
    for i in range(first, len(alphabet)):
        # Sorted by size, so nothing further along fits either.
        if alphabet[i][0] > room:
            break
        # Repeating the letter one period back keeps the period,
        # anything larger makes the whole prefix the new period.
        if t and i == prefix[t - period]:
            next_period = period
        else:
            next_period = t + 1
        yield from _necklaces(alphabet, k, budget - alphabet[i][0], prefix + [i], next_period)


def necklace_components(n, k=None):
    """
    Generate the components of size n by building their codes position by
    position as necklaces over the alphabet of trees.

    With k given, only components whose cycle has length k are produced;
    otherwise all cycle lengths from 1 to n, in that order. Trees of size n
    itself are streamed, only smaller ones are pooled.
    """
    if n < 0:
        raise ValueError(f"component size must be nonnegative, got {n}")
    lengths = range(1, n + 1) if k is None else [k]
    for length in lengths:
        if not 1 <= length <= n:
            continue
        if length == 1:
            # A loop with one tree of n nodes; every such tree is its own
            # rotation.
            for tree in trees(n):
                yield (tree,)
            continue
        alphabet = tree_alphabet(n - length + 1)
        for indices in _necklaces(alphabet, length, n, [], 1):
            code = tuple(alphabet[i] for i in indices)
            if is_min_rotation(code):
                yield code
