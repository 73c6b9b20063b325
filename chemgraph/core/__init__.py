"""Core data structures of the chemgraph molecular model."""

from chemgraph.core.atom import Atom, AtomParity
from chemgraph.core.atom_container import AtomContainer, MINIMUM_BOND_ORDER_SENTINEL
from chemgraph.core.chem_object import (
    ChemObject,
    ChemObjectChangeEvent,
    ChemObjectListener,
)
from chemgraph.core.connection_matrix import (
    ConnectionMatrix,
    ConnectionMatrixParameters,
)
from chemgraph.core.electron_container import (
    Bond,
    BondOrder,
    BondStereo,
    ElectronContainer,
    LonePair,
    SingleElectron,
)

__all__ = [
    "Atom",
    "AtomParity",
    "AtomContainer",
    "MINIMUM_BOND_ORDER_SENTINEL",
    "Bond",
    "BondOrder",
    "BondStereo",
    "ChemObject",
    "ChemObjectChangeEvent",
    "ChemObjectListener",
    "ConnectionMatrix",
    "ConnectionMatrixParameters",
    "ElectronContainer",
    "LonePair",
    "SingleElectron",
]
