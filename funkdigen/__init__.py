"""Generate functional digraphs up to isomorphism with polynomial delay."""

__version__ = "0.1.0"

from funkdigen.components import components, necklace_components, next_component
from funkdigen.digraph6 import Digraph6Error, decode, encode
from funkdigen.digraphs import digraphs
from funkdigen.render import render, to_text
from funkdigen.trees import tree_code, trees
