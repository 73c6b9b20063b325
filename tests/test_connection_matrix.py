"""Unit tests for connection matrix generation."""

import unittest

import networkx as nx
import numpy as np
from scipy import sparse

from chemgraph.core.atom import Atom
from chemgraph.core.atom_container import AtomContainer
from chemgraph.core.connection_matrix import (
    ConnectionMatrix,
    ConnectionMatrixParameters,
)
from chemgraph.core.electron_container import Bond, BondOrder


class TestConnectionMatrix(unittest.TestCase):
    """Test suite for ConnectionMatrix class."""

    def setUp(self):
        """Set up a chain A0-A1=A2-A3 with a lone pair on A2."""
        self.container = AtomContainer()
        for symbol in ("C", "C", "O", "N"):
            self.container.add_atom(Atom(symbol))
        self.container.add_bond(0, 1, BondOrder.SINGLE)
        self.container.add_bond(1, 2, BondOrder.DOUBLE)
        self.container.add_bond(2, 3, BondOrder.SINGLE)
        self.container.add_lone_pair(2)
        self.expected = np.array(
            [
                [0.0, 1.0, 0.0, 0.0],
                [1.0, 0.0, 2.0, 0.0],
                [0.0, 2.0, 0.0, 1.0],
                [0.0, 0.0, 1.0, 0.0],
            ]
        )

    def test_dense_matrix(self):
        matrix = ConnectionMatrix.get_matrix(self.container)
        self.assertIsInstance(matrix, np.ndarray)
        np.testing.assert_array_equal(matrix, self.expected)

    def test_matrix_is_symmetric_with_zero_diagonal(self):
        self.container.add_bond(0, 3, BondOrder.AROMATIC)
        matrix = ConnectionMatrix.get_matrix(self.container)
        np.testing.assert_array_equal(matrix, matrix.T)
        np.testing.assert_array_equal(np.diag(matrix), np.zeros(4))
        self.assertEqual(matrix[3, 0], 1.5)

    def test_sparse_matrix(self):
        parameters = ConnectionMatrixParameters(use_sparse_matrix=True)
        connection_matrix = ConnectionMatrix(self.container, parameters)
        self.assertTrue(sparse.issparse(connection_matrix.matrix))
        np.testing.assert_array_equal(connection_matrix.to_numpy(), self.expected)

    def test_empty_container(self):
        matrix = ConnectionMatrix.get_matrix(AtomContainer())
        self.assertEqual(matrix.shape, (0, 0))

    def test_dangling_bond_skipped(self):
        outsider = Atom("Cl")
        self.container.add_bond(Bond(self.container.get_atom_at(0), outsider))
        with self.assertLogs("chemgraph.core.connection_matrix", level="WARNING"):
            matrix = ConnectionMatrix.get_matrix(self.container)
        np.testing.assert_array_equal(matrix, self.expected)

    def test_to_networkx(self):
        graph = ConnectionMatrix.to_networkx(self.container)
        self.assertEqual(graph.number_of_nodes(), 4)
        self.assertEqual(graph.number_of_edges(), 3)
        self.assertEqual(graph.nodes[2]["symbol"], "O")
        self.assertEqual(graph.edges[1, 2]["order"], 2.0)
        self.assertTrue(nx.is_connected(graph))

    def test_parameters_are_frozen(self):
        parameters = ConnectionMatrixParameters()
        with self.assertRaises(Exception):
            parameters.use_sparse_matrix = True


if __name__ == "__main__":
    unittest.main()
