import pytest

from brute import canonical_form, function_classes, is_weakly_connected
from funkdigen.components import components
from funkdigen.digraphs import digraphs, partitions
from funkdigen.render import render, render_component

# OEIS A001372, functional digraphs on n vertices up to isomorphism
FUNCTIONAL = [1, 1, 3, 7, 19, 47, 130, 343, 951, 2615]


def test_partitions():
    assert list(partitions(0)) == [[]]
    assert list(partitions(1)) == [[1]]
    assert list(partitions(5)) == [
        [1, 1, 1, 1, 1],
        [1, 1, 1, 2],
        [1, 1, 3],
        [1, 2, 2],
        [1, 4],
        [2, 3],
        [5],
    ]


@pytest.mark.parametrize("n,expected", list(enumerate(FUNCTIONAL)))
def test_digraph_counts(n, expected):
    assert sum(1 for _ in digraphs(n)) == expected


def test_empty_digraph():
    assert list(digraphs(0)) == [()]
    assert list(digraphs(0, connected=True)) == []


def test_invalid_size():
    with pytest.raises(ValueError):
        list(digraphs(-1))


def test_first_digraphs_of_five_vertices():
    codes = list(digraphs(5))
    assert codes[:3] == [
        ((((1,),),) * 5),
        (((1,),),) * 3 + (((1,), (1,)),),
        (((1,),),) * 3 + (((2, 1),),),
    ]
    assert codes[-1] == (((5, 1, 1, 1, 1),),)


@pytest.mark.parametrize("n", range(1, 8))
def test_digraph_codes_are_canonical(n):
    codes = list(digraphs(n))
    assert len(set(codes)) == len(codes)
    for code in codes:
        sizes = [sum(t[0] for t in c) for c in code]
        assert sum(sizes) == n
        assert sizes == sorted(sizes)


@pytest.mark.parametrize("n", range(0, 6))
def test_unique_and_complete(n):
    forms = [canonical_form(render(code)) for code in digraphs(n)]
    assert len(set(forms)) == len(forms)
    assert set(forms) == function_classes(n)


@pytest.mark.parametrize("n", range(1, 6))
def test_connected_digraphs(n):
    full = {canonical_form(render(code)) for code in digraphs(n)}
    connected = set()
    for code in digraphs(n, connected=True):
        f = render_component(code)
        assert is_weakly_connected(f)
        connected.add(canonical_form(f))
    if n > 1:
        assert connected < full
    assert connected <= full
    assert len(connected) == sum(1 for _ in components(n))
    expected = {c for c in function_classes(n) if is_weakly_connected(list(c))}
    assert connected == expected
