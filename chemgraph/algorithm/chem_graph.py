# chemgraph/algorithm/chem_graph.py

"""Random connected subgraph picking for stochastic structure generation."""

import logging
from collections import deque
from typing import List, Literal, Optional, Sequence, Union

import numpy as np
from pydantic import BaseModel
from scipy import sparse

from chemgraph.core.atom_container import AtomContainer
from chemgraph.core.connection_matrix import ConnectionMatrix
from chemgraph.errors import InvalidGraphError
from chemgraph.utils.random_numbers import RandomIntSource, get_default_tool

logger = logging.getLogger(__name__)

GraphInput = Union[AtomContainer, ConnectionMatrix, np.ndarray, sparse.spmatrix]


class SamplerParameters(BaseModel):
    """Parameters for picking a random subgraph."""

    strategy: Literal["depth_first", "breadth_first"] = "depth_first"
    num_atoms: Optional[int] = None
    seed: Optional[int] = None

    class Config:
        """Pydantic model configuration."""

        frozen = True


class ChemGraph:
    """Picks random connected atom subsets from a fixed connection matrix.

    The matrix is copied when the picker is created, so later edits of the
    source container do not affect it. A picker keeps per-traversal state
    and must not be shared between concurrent traversals.
    """

    def __init__(
        self,
        graph: GraphInput,
        num_atoms: Optional[int] = None,
        random_source: Optional[RandomIntSource] = None,
    ):
        """Initialize the picker.

        Args:
            graph: Atom container, connection matrix, or square bond order
                matrix. Nonzero cells mark adjacent atoms.
            num_atoms: Target subgraph size. Defaults to half the atom count,
                rounded down.
            random_source: Source of uniform integers. Defaults to the shared
                RandomNumbersTool.
        """
        self.contab = self._snapshot(graph)
        self.dim = self.contab.shape[0]
        self._num_atoms = self.dim // 2
        if num_atoms is not None:
            self.set_num_atoms(num_atoms)
        self.random_source = random_source or get_default_tool()

        self._visited: List[bool] = []
        self._subgraph: List[int] = []

    @staticmethod
    def _snapshot(graph: GraphInput) -> np.ndarray:
        if isinstance(graph, AtomContainer):
            matrix = ConnectionMatrix(graph).to_numpy()
        elif isinstance(graph, ConnectionMatrix):
            matrix = graph.to_numpy()
        elif sparse.issparse(graph):
            matrix = graph.toarray()
        else:
            matrix = np.asarray(graph)

        matrix = np.array(matrix, dtype=float)
        if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
            raise InvalidGraphError(
                f"Connection matrix must be square, got shape {matrix.shape}"
            )
        return matrix

    @property
    def num_atoms(self) -> int:
        """Target number of atoms in a picked subgraph."""
        return self._num_atoms

    @num_atoms.setter
    def num_atoms(self, value: int) -> None:
        self.set_num_atoms(value)

    def get_num_atoms(self) -> int:
        return self._num_atoms

    def set_num_atoms(self, num_atoms: int) -> None:
        if num_atoms < 0:
            raise InvalidGraphError(
                f"Subgraph size must not be negative: {num_atoms}"
            )
        self._num_atoms = int(num_atoms)

    @property
    def subgraph(self) -> List[int]:
        """Atom positions picked by the last traversal, in visiting order."""
        return self._subgraph

    @subgraph.setter
    def subgraph(self, value: Sequence[int]) -> None:
        self._subgraph = list(value)

    def get_subgraph(self) -> List[int]:
        return self._subgraph

    def set_subgraph(self, subgraph: Sequence[int]) -> None:
        self._subgraph = list(subgraph)

    def _adjacent(self, atom: int) -> List[int]:
        neighbours = np.flatnonzero(self.contab[atom]).tolist()
        return [n for n in neighbours if not self._visited[n]]

    def _pop_random(self, candidates: List[int]) -> int:
        index = self.random_source.random_int(0, len(candidates) - 1)
        return candidates.pop(index)

    def _reset(self) -> None:
        if self.dim == 0:
            raise InvalidGraphError("Cannot pick a subgraph from an empty graph")
        self._visited = [False] * self.dim
        self._subgraph = []

    def _pick_seed(self) -> int:
        return self.random_source.random_int(0, self.dim - 1)

    def pick_depth_first_graph(self) -> List[int]:
        """Pick a subgraph by depth first traversal from a random atom.

        Neighbours of each visited atom are explored in random order. The
        traversal ends once ``num_atoms`` atoms were collected or the seed's
        component is exhausted.

        Returns:
            Atom positions in visiting order.

        Raises:
            InvalidGraphError: If the graph has no atoms.
        """
        self._reset()
        if self._num_atoms == 0:
            return self._subgraph

        seed_atom = self._pick_seed()
        logger.debug(
            "Depth first pick from atom %d, target %d", seed_atom, self._num_atoms
        )

        # Each frame holds the not yet explored neighbours of one visited atom.
        stack = [self._visit_depth_first(seed_atom)]
        while stack and len(self._subgraph) < self._num_atoms:
            remaining = stack[-1]
            if not remaining:
                stack.pop()
                continue
            next_atom = self._pop_random(remaining)
            if not self._visited[next_atom]:
                stack.append(self._visit_depth_first(next_atom))

        logger.debug("Depth first pick returned %d atoms", len(self._subgraph))
        return self._subgraph

    def _visit_depth_first(self, atom: int) -> List[int]:
        self._visited[atom] = True
        self._subgraph.append(atom)
        return self._adjacent(atom)

    def pick_breadth_first_graph(self) -> List[int]:
        """Pick a subgraph by breadth first traversal from a random atom.

        Atoms are marked visited when queued, and the unvisited neighbours of
        each dequeued atom are queued in random order.

        Returns:
            Atom positions in visiting order.

        Raises:
            InvalidGraphError: If the graph has no atoms.
        """
        self._reset()
        if self._num_atoms == 0:
            return self._subgraph

        seed_atom = self._pick_seed()
        logger.debug(
            "Breadth first pick from atom %d, target %d", seed_atom, self._num_atoms
        )

        queue = deque([seed_atom])
        self._visited[seed_atom] = True
        while queue and len(self._subgraph) < self._num_atoms:
            front = queue.popleft()
            self._subgraph.append(front)
            if len(self._subgraph) >= self._num_atoms:
                break
            adjacent = self._adjacent(front)
            while adjacent:
                next_atom = self._pop_random(adjacent)
                self._visited[next_atom] = True
                queue.append(next_atom)

        logger.debug("Breadth first pick returned %d atoms", len(self._subgraph))
        return self._subgraph

    pick_df_graph = pick_depth_first_graph
    pick_bf_graph = pick_breadth_first_graph
