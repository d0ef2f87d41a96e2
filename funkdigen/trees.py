"""
Isomorphism codes of unlabeled rooted trees.

A tree code is a tuple of integers: the number of nodes of the tree followed
by the codes of its immediate subtrees, concatenated in ascending order.
Equivalently, it is the preorder listing of the subtree sizes of the tree
with children visited in ascending order, so every code is self-delimiting.
"""
import logging
from itertools import chain

logger = logging.getLogger(__name__)

LEAF = (1,)

# Trees of size n, in ascending order; filled once per size and then only
# read by larger sizes.
TREE_MEMO = {1: [LEAF]}


def tree_size(code):
    return code[0]


def subtrees(code):
    """Split a tree code into the codes of its immediate subtrees."""
    result = []
    k = 1
    while k < len(code):
        result.append(code[k:k + code[k]])
        k += code[k]
    return result


def join(forest):
    """Hang a nondecreasing sequence of subtrees below a new root."""
    return (1 + sum(t[0] for t in forest),) + tuple(chain.from_iterable(forest))


def tree_pool(n):
    """All trees with n nodes, as a list computed only once."""
    if n < 1:
        raise ValueError(f"tree size must be positive, got {n}")
    if n not in TREE_MEMO:
        logger.debug("building tree pool for size %d", n)
        TREE_MEMO[n] = list(trees(n))
    return TREE_MEMO[n]


def tree_alphabet(m):
    """All trees with at most m nodes, in ascending order."""
    alphabet = []
    for size in range(1, m + 1):
        alphabet.extend(tree_pool(size))
    return alphabet


def _forests(alphabet, budget, first):
    # Nondecreasing sequences of trees from alphabet[first:] of total size
    # budget. The alphabet is sorted by size first, so we stop as soon as
    # a candidate no longer fits.
    if budget == 0:
        yield ()
        return
    for i in range(first, len(alphabet)):
        tree = alphabet[i]
        if tree[0] > budget:
            break
        # The rest may repeat tree but never go below it.
        for rest in _forests(alphabet, budget - tree[0], i):
            yield (tree,) + rest


def trees(n):
    """
    Generate the codes of all rooted trees with n nodes, each exactly once.

    The subtrees below the root form a multiset of smaller trees whose sizes
    add up to n - 1; choosing them in nondecreasing order is what rules out
    permuted duplicates. Codes come out in ascending order.
    """
    if n < 1:
        raise ValueError(f"tree size must be positive, got {n}")
    if n == 1:
        yield LEAF
        return
    alphabet = tree_alphabet(n - 1)
    for forest in _forests(alphabet, n - 1, 0):
        yield join(forest)


def tree_code(children, root=0):
    """
    Compute the code of an explicit rooted tree.

    children[v] lists the children of node v in any order. The result does
    not depend on that order.
    """
    codes = {}
    stack = [(root, False)]
    while stack:
        v, visited = stack.pop()
        if visited:
            codes[v] = join(sorted(codes.pop(c) for c in children[v]))
        else:
            stack.append((v, True))
            stack.extend((c, False) for c in children[v])
    return codes[root]
