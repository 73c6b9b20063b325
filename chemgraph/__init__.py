"""chemgraph: molecular graph containers and random subgraph picking."""

import logging
from typing import List, Optional, Union

import networkx as nx
from rdkit import Chem

from chemgraph.algorithm.chem_graph import ChemGraph, SamplerParameters
from chemgraph.core.atom import Atom, AtomParity
from chemgraph.core.atom_container import AtomContainer
from chemgraph.core.connection_matrix import (
    ConnectionMatrix,
    ConnectionMatrixParameters,
)
from chemgraph.core.electron_container import (
    Bond,
    BondOrder,
    BondStereo,
    LonePair,
    SingleElectron,
)
from chemgraph.errors import (
    AtomContainerIndexError,
    ChemGraphError,
    CloneError,
    InvalidGraphError,
)
from chemgraph.utils.input_handler import convert_to_atom_container
from chemgraph.utils.logging_utils import log_exception
from chemgraph.utils.random_numbers import RandomNumbersTool

logger = logging.getLogger(__name__)


class RandomSubgraphPicker:
    """Main interface for picking random connected subgraphs of molecules."""

    def __init__(
        self,
        sampler_params: Optional[SamplerParameters] = None,
        matrix_params: Optional[ConnectionMatrixParameters] = None,
    ):
        """Initialize the picker.

        Args:
            sampler_params: Optional traversal parameters.
            matrix_params: Optional connection matrix parameters.
        """
        self.sampler_params = sampler_params or SamplerParameters()
        self.matrix_params = matrix_params
        self.random_source = RandomNumbersTool(self.sampler_params.seed)

    def pick(
        self, molecule: Union[str, Chem.Mol, nx.Graph, AtomContainer]
    ) -> List[int]:
        """Pick a random connected subgraph of a molecule.

        Args:
            molecule: Molecule in any supported format:
                - SMILES string
                - RDKit Mol object
                - NetworkX Graph
                - AtomContainer

        Returns:
            Atom positions of the picked subgraph, in visiting order.

        Raises:
            ValueError: If the input cannot be converted.
            InvalidGraphError: If the molecule has no atoms.
        """
        container = convert_to_atom_container(molecule)
        matrix = ConnectionMatrix(container, self.matrix_params)
        try:
            chem_graph = ChemGraph(
                matrix,
                num_atoms=self.sampler_params.num_atoms,
                random_source=self.random_source,
            )
            if self.sampler_params.strategy == "breadth_first":
                return chem_graph.pick_breadth_first_graph()
            return chem_graph.pick_depth_first_graph()
        except ChemGraphError as exc:
            log_exception(logger, exc)
            raise

    def pick_atoms(
        self, molecule: Union[str, Chem.Mol, nx.Graph, AtomContainer]
    ) -> AtomContainer:
        """Pick a random subgraph and return it as a container.

        The new container shares the picked atoms and every bond between
        them with the converted input.

        Args:
            molecule: Molecule in any supported format.

        Returns:
            Container holding the picked atoms and the bonds among them.
        """
        container = convert_to_atom_container(molecule)
        picked = [container.get_atom_at(i) for i in self.pick(container)]
        subgraph = AtomContainer()
        for atom in picked:
            subgraph.add_atom(atom)
        for bond in container.bonds:
            if all(subgraph.contains(atom) for atom in bond.atoms):
                subgraph.add_bond(bond)
        return subgraph


__all__ = [
    "RandomSubgraphPicker",
    "Atom",
    "AtomParity",
    "AtomContainer",
    "AtomContainerIndexError",
    "Bond",
    "BondOrder",
    "BondStereo",
    "ChemGraph",
    "ChemGraphError",
    "CloneError",
    "ConnectionMatrix",
    "ConnectionMatrixParameters",
    "InvalidGraphError",
    "LonePair",
    "RandomNumbersTool",
    "SamplerParameters",
    "SingleElectron",
    "convert_to_atom_container",
]
