"""Unit tests for the RandomSubgraphPicker interface."""

import logging
import unittest

import networkx as nx
from rdkit import Chem

from chemgraph import (
    AtomContainer,
    ConnectionMatrixParameters,
    InvalidGraphError,
    RandomSubgraphPicker,
    SamplerParameters,
)
from chemgraph.errors import ChemGraphError
from chemgraph.utils.logging_utils import log_exception


class TestRandomSubgraphPicker(unittest.TestCase):
    """Test suite for RandomSubgraphPicker class."""

    def setUp(self):
        """Set up test fixtures."""
        self.hexane = "CCCCCC"
        self.naphthalene = Chem.MolFromSmiles("c1ccc2ccccc2c1")

    def test_default_pick(self):
        picker = RandomSubgraphPicker(SamplerParameters(seed=1))
        result = picker.pick(self.hexane)
        self.assertEqual(len(result), 3)
        self.assertEqual(len(set(result)), 3)

    def test_breadth_first_pick(self):
        picker = RandomSubgraphPicker(
            SamplerParameters(strategy="breadth_first", num_atoms=10, seed=2),
            ConnectionMatrixParameters(use_sparse_matrix=True),
        )
        self.assertEqual(sorted(picker.pick(self.naphthalene)), list(range(10)))

    def test_seeded_picks_repeat(self):
        parameters = SamplerParameters(num_atoms=5, seed=17)
        first = RandomSubgraphPicker(parameters).pick(self.naphthalene)
        second = RandomSubgraphPicker(parameters).pick(self.naphthalene)
        self.assertEqual(first, second)

    def test_pick_atoms(self):
        picker = RandomSubgraphPicker(SamplerParameters(num_atoms=4, seed=3))
        subgraph = picker.pick_atoms(self.hexane)
        self.assertIsInstance(subgraph, AtomContainer)
        self.assertEqual(subgraph.atom_count, 4)
        # A connected four atom piece of a chain holds three bonds.
        self.assertEqual(subgraph.bond_count, 3)

    def test_networkx_input(self):
        graph = nx.path_graph(6)
        nx.set_node_attributes(graph, "C", "symbol")
        picker = RandomSubgraphPicker(SamplerParameters(num_atoms=6, seed=4))
        self.assertEqual(sorted(picker.pick(graph)), list(range(6)))

    def test_invalid_strategy(self):
        with self.assertRaises(ValueError):
            SamplerParameters(strategy="sideways")

    def test_empty_molecule_is_logged(self):
        picker = RandomSubgraphPicker()
        with self.assertLogs("chemgraph", level="ERROR"):
            with self.assertRaises(InvalidGraphError):
                picker.pick(AtomContainer())


class TestLoggingUtils(unittest.TestCase):
    """Test suite for logging helpers."""

    def test_log_exception(self):
        logger = logging.getLogger("chemgraph.test")
        error = ChemGraphError("broken", context={"position": 3})
        with self.assertLogs("chemgraph.test", level="ERROR") as captured:
            message = log_exception(logger, error)
        self.assertEqual(message, "broken: {'position': 3}")
        self.assertIn("broken", captured.output[0])

        with self.assertLogs("chemgraph.test", level="ERROR"):
            message = log_exception(logger, RuntimeError("boom"))
        self.assertEqual(message, "Unexpected error: boom")


if __name__ == "__main__":
    unittest.main()
