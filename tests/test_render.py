import pytest

from funkdigen.components import components, cycle
from funkdigen.digraphs import digraphs
from funkdigen.render import render, render_component, to_text
from funkdigen.trees import tree_code


def test_render_examples():
    assert render(()) == []
    assert render_component(cycle(1)) == [0]
    assert render_component(cycle(3)) == [1, 2, 0]
    assert render((((1,), (4, 1, 1, 1)),)) == [1, 0, 1, 1, 1]
    assert render((((5, 4, 1, 1, 1),),)) == [0, 0, 1, 1, 1]
    assert render((((5, 1, 1, 1, 1),),)) == [0, 0, 0, 0, 0]
    assert render((((1,),), ((1,), (1,)))) == [0, 2, 1]


def test_render_is_deterministic():
    code = (((1,),), ((2, 1), (3, 1, 1)))
    assert render(code) == render(code)
    assert render(code) is not render(code)


@pytest.mark.parametrize("n", range(0, 8))
def test_outdegree_one(n):
    for code in digraphs(n):
        f = render(code)
        assert len(f) == n
        assert all(0 <= w < n for w in f)


def _read_back(f, k):
    # The cycle occupies vertices 0..k-1; collect the tree hanging from each.
    children = [[] for _ in f]
    for v, w in enumerate(f):
        if v >= k:
            children[w].append(v)
    return tuple(tree_code(children, root=i) for i in range(k))


@pytest.mark.parametrize("n", range(1, 8))
def test_render_reads_back_to_code(n):
    for code in components(n):
        f = render_component(code)
        k = len(code)
        assert [f[i] for i in range(k)] == [(i + 1) % k for i in range(k)]
        assert _read_back(f, k) == code


def test_to_text():
    assert to_text((1,)) == "[1]"
    assert to_text(((1,), (4, 1, 1, 1))) == "[[1], [4, 1, 1, 1]]"
    assert to_text((((1,),),) * 5) == "[[[1]], [[1]], [[1]], [[1]], [[1]]]"
    assert to_text(()) == "[]"
