# chemgraph/algorithm/__init__.py
"""Traversal algorithms working on chemgraph connection matrices."""

# Standard library imports
from typing import List

# Local imports
from chemgraph.algorithm.chem_graph import ChemGraph, SamplerParameters

__all__: List[str] = [
    "ChemGraph",
    "SamplerParameters",
]
