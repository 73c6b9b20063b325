"""Checks for which data features an atom container carries."""

from chemgraph.core.atom_container import AtomContainer


class MoleculeFeaturesTool:
    """Scans a container's atoms and bonds for the presence of data features."""

    @staticmethod
    def has_partial_charges(container: AtomContainer) -> bool:
        return any(atom.charge != 0.0 for atom in container.atoms)

    @staticmethod
    def has_formal_charges(container: AtomContainer) -> bool:
        return any(atom.formal_charge != 0 for atom in container.atoms)

    @staticmethod
    def has_element_symbols(container: AtomContainer) -> bool:
        return any(atom.symbol for atom in container.atoms)

    @staticmethod
    def has_graph_representation(container: AtomContainer) -> bool:
        """Check that every bond joins exactly two atoms.

        Args:
            container: Container to inspect.

        Returns:
            True if no bond has a missing endpoint.
        """
        return all(bond.atom_count == 2 for bond in container.bonds)
