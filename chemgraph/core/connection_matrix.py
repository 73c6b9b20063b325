"""Connection matrix generation for atom containers."""

import logging
from typing import Optional, Union

import networkx as nx
import numpy as np
from pydantic import BaseModel
from scipy import sparse

from chemgraph.core.atom_container import AtomContainer

logger = logging.getLogger(__name__)


class ConnectionMatrixParameters(BaseModel):
    """Parameters for controlling connection matrix generation."""

    use_sparse_matrix: bool = False
    dtype: str = "float64"

    class Config:
        """Pydantic model configuration."""

        frozen = True


class ConnectionMatrix:
    """Dense or sparse atom-by-atom matrix of bond orders."""

    def __init__(
        self,
        container: AtomContainer,
        parameters: Optional[ConnectionMatrixParameters] = None,
    ):
        """Build the connection matrix of a container.

        Args:
            container: Atom container to read atoms and bonds from.
            parameters: Optional matrix generation parameters.
        """
        self.parameters = parameters or ConnectionMatrixParameters()
        self.dimension = container.atom_count
        self.matrix = self._create_matrix(container)

    @classmethod
    def get_matrix(
        cls,
        container: AtomContainer,
        parameters: Optional[ConnectionMatrixParameters] = None,
    ) -> Union[np.ndarray, sparse.csr_matrix]:
        """Build and return the raw matrix for a container.

        Args:
            container: Atom container to read atoms and bonds from.
            parameters: Optional matrix generation parameters.

        Returns:
            Square matrix where cell [i, j] holds the order of the bond
            between atoms i and j, and 0 where they are not bonded.
        """
        return cls(container, parameters).matrix

    def _create_matrix(
        self, container: AtomContainer
    ) -> Union[np.ndarray, sparse.csr_matrix]:
        """Fill the matrix from the bonds of the container.

        Args:
            container: Atom container to read from.

        Returns:
            Symmetric bond order matrix with a zero diagonal.
        """
        size = self.dimension
        dtype = np.dtype(self.parameters.dtype)

        # Use dictionary of keys sparse matrix during construction
        if self.parameters.use_sparse_matrix:
            matrix = sparse.dok_matrix((size, size), dtype=dtype)
        else:
            matrix = np.zeros((size, size), dtype=dtype)

        for bond in container.bonds:
            atom1, atom2 = bond.atoms
            i = container.get_atom_number(atom1)
            j = container.get_atom_number(atom2)
            if i == -1 or j == -1:
                logger.warning(
                    "Skipping bond with an atom outside the container: %s", bond
                )
                continue
            if i == j:
                continue
            matrix[i, j] = bond.order
            matrix[j, i] = bond.order

        if self.parameters.use_sparse_matrix:
            return matrix.tocsr()
        return matrix

    def to_numpy(self) -> np.ndarray:
        """Convert the connection matrix to a dense NumPy array.

        Returns:
            NumPy array containing the bond orders.
        """
        if sparse.issparse(self.matrix):
            return self.matrix.toarray()
        return self.matrix

    @staticmethod
    def to_networkx(container: AtomContainer) -> nx.Graph:
        """Export the bond graph of a container.

        Nodes are atom positions carrying a ``symbol`` attribute; edges carry
        the bond ``order``.

        Args:
            container: Atom container to export.

        Returns:
            Undirected NetworkX graph.
        """
        graph = nx.Graph()
        for position, atom in enumerate(container.atoms):
            graph.add_node(
                position,
                symbol=atom.symbol,
                formal_charge=atom.formal_charge,
                charge=atom.charge,
            )
        for bond in container.bonds:
            atom1, atom2 = bond.atoms
            i = container.get_atom_number(atom1)
            j = container.get_atom_number(atom2)
            if i == -1 or j == -1 or i == j:
                continue
            graph.add_edge(i, j, order=bond.order, stereo=bond.stereo)
        return graph
