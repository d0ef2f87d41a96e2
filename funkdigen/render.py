"""
Turn isomorphism codes into explicit functional digraphs and into text.

An explicit digraph on n vertices is a list f with f[v] the out-neighbour
of vertex v.
"""


def _render_tree(code, root, first, f):
    # The code lists subtree sizes in preorder, so position j > 0 of the
    # code becomes vertex first + j - 1. open_nodes holds (position, end)
    # for the ancestors of the current position.
    open_nodes = [(0, code[0])]
    for j in range(1, len(code)):
        while open_nodes[-1][1] <= j:
            open_nodes.pop()
        parent = open_nodes[-1][0]
        f.append(root if parent == 0 else first + parent - 1)
        open_nodes.append((j, j + code[j]))


def render(code):
    """
    Build the explicit digraph of a digraph code.

    Each component takes the next k vertex numbers for its cycle, then the
    vertices of its trees, one tree after another, in preorder.
    """
    f = []
    for component in code:
        k = len(component)
        base = len(f)
        f.extend(base + (i + 1) % k for i in range(k))
        for i, tree in enumerate(component):
            _render_tree(tree, base + i, len(f), f)
    return f


def render_component(code):
    return render((code,))


def _lists(code):
    if isinstance(code, int):
        return code
    return [_lists(x) for x in code]


def to_text(code):
    """Internal textual form, e.g. [[[1]], [[1], [1]]]."""
    return str(_lists(code))
