"""
Isomorphism codes of functional digraphs.

A functional digraph is a multiset of connected components. Its code lists
the components by ascending size, and the components of equal size in
nondecreasing order of their position in the component pool of that size.
"""
import logging
from collections import Counter
from itertools import combinations_with_replacement

from funkdigen.components import component_pool, components

logger = logging.getLogger(__name__)


def partitions(n):
    """Generate the partitions of n as ascending lists, in lexicographic order."""
    def p_helper(n, min_val):
        if n == 0:
            yield []
            return
        for x in range(min_val, n + 1):
            # The remaining parts are at least x, so the rest is either
            # empty or at least x itself.
            if n - x != 0 and n - x < x:
                continue
            for p in p_helper(n - x, x):
                yield [x] + p

    yield from p_helper(n, 1)


def _fill(blocks, i, prefix):
    # blocks[i] = (size, count): choose count components of that size,
    # repetitions allowed, nondecreasing in pool order.
    if i == len(blocks):
        yield prefix
        return
    size, count = blocks[i]
    # Smaller sizes vary slowest, the last block fastest.
    for chosen in combinations_with_replacement(component_pool(size), count):
        yield from _fill(blocks, i + 1, prefix + chosen)


def digraphs(n, connected=False):
    """
    Generate the codes of all functional digraphs on n vertices, each once.

    The sizes of the components run through the partitions of n; for each
    of them every choice of components is produced. With connected=True
    only the connected digraphs are generated, as bare component codes.
    """
    if n < 0:
        raise ValueError(f"digraph size must be nonnegative, got {n}")
    if connected:
        yield from components(n)
        return
    for p in partitions(n):
        if p == [n]:
            # Only pools of smaller sizes are kept around.
            for code in components(n):
                yield (code,)
            continue
        logger.debug("digraphs with component sizes %s", p)
        blocks = sorted(Counter(p).items())
        yield from _fill(blocks, 0, ())
