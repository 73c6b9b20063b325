"""Electron containers: bonds, lone pairs and single electrons."""

from __future__ import annotations

from typing import List, Optional, Sequence

from chemgraph.core.atom import Atom
from chemgraph.core.chem_object import ChemObject


class BondOrder:
    """Common bond order values."""

    SINGLE = 1.0
    AROMATIC = 1.5
    DOUBLE = 2.0
    TRIPLE = 3.0


class BondStereo:
    """Stereo descriptors for bonds."""

    NONE = 0
    UP = 1
    DOWN = -1
    UNDEFINED = 4


class ElectronContainer(ChemObject):
    """Localized group of electrons attached to one or more atoms."""

    def __init__(self, electron_count: int = 0):
        """Initialize the container.

        Args:
            electron_count: Number of electrons held.
        """
        super().__init__()
        self._electron_count = electron_count

    @property
    def electron_count(self) -> int:
        return self._electron_count

    @electron_count.setter
    def electron_count(self, value: int) -> None:
        self._electron_count = value
        self.notify_changed()

    def contains(self, atom: Atom) -> bool:
        """Check whether the container is located on the given atom.

        Args:
            atom: Atom to look for.

        Returns:
            False for the generic container.
        """
        return False

    def __str__(self) -> str:
        return f"ElectronContainer({id(self)}, EC:{self._electron_count})"


class Bond(ElectronContainer):
    """Bond between two atoms with a numeric order and stereo descriptor."""

    def __init__(
        self,
        atom1: Optional[Atom] = None,
        atom2: Optional[Atom] = None,
        order: float = BondOrder.SINGLE,
        stereo: int = BondStereo.NONE,
    ):
        """Initialize the bond.

        Args:
            atom1: First atom.
            atom2: Second atom.
            order: Bond order, may be fractional.
            stereo: Stereo descriptor.
        """
        super().__init__(electron_count=2)
        self._atoms: List[Optional[Atom]] = [atom1, atom2]
        self._order = float(order)
        self._stereo = stereo

    @property
    def atoms(self) -> List[Optional[Atom]]:
        """Copy of the two bonded atoms."""
        return list(self._atoms)

    def set_atoms(self, atoms: Sequence[Atom]) -> None:
        """Replace both atoms of the bond.

        Args:
            atoms: Exactly two atoms.
        """
        if len(atoms) != 2:
            raise ValueError(f"A bond needs exactly two atoms, got {len(atoms)}")
        self._atoms = list(atoms)
        self.notify_changed()

    @property
    def atom_count(self) -> int:
        return sum(1 for atom in self._atoms if atom is not None)

    def get_atom(self, position: int) -> Optional[Atom]:
        return self._atoms[position]

    def set_atom(self, atom: Atom, position: int) -> None:
        self._atoms[position] = atom
        self.notify_changed()

    @property
    def order(self) -> float:
        return self._order

    @order.setter
    def order(self, value: float) -> None:
        self._order = float(value)
        self.notify_changed()

    @property
    def stereo(self) -> int:
        return self._stereo

    @stereo.setter
    def stereo(self, value: int) -> None:
        self._stereo = value
        self.notify_changed()

    def contains(self, atom: Atom) -> bool:
        return any(bonded is atom for bonded in self._atoms)

    def get_connected_atom(self, atom: Atom) -> Optional[Atom]:
        """Get the other end of the bond.

        Args:
            atom: One of the bonded atoms.

        Returns:
            The partner atom, or None if ``atom`` is not part of this bond.
        """
        if self._atoms[0] is atom:
            return self._atoms[1]
        if self._atoms[1] is atom:
            return self._atoms[0]
        return None

    def clone(self) -> Bond:
        clone = super().clone()
        # Endpoints are rebound by the owning container.
        clone._atoms = list(self._atoms)
        return clone

    def __str__(self) -> str:
        return (
            f"Bond({id(self)}, #O:{self._order}, #S:{self._stereo}, "
            f"#A:{self.atom_count}, {', '.join(str(a) for a in self._atoms)})"
        )


class _SingleAtomContainer(ElectronContainer):
    """Electron container located on exactly one atom."""

    def __init__(self, atom: Optional[Atom], electron_count: int):
        super().__init__(electron_count=electron_count)
        self._atom = atom

    @property
    def atom(self) -> Optional[Atom]:
        return self._atom

    @atom.setter
    def atom(self, value: Optional[Atom]) -> None:
        self._atom = value
        self.notify_changed()

    def contains(self, atom: Atom) -> bool:
        return self._atom is atom


class LonePair(_SingleAtomContainer):
    """Non-bonding electron pair located on one atom."""

    def __init__(self, atom: Optional[Atom] = None):
        super().__init__(atom, electron_count=2)

    def __str__(self) -> str:
        return f"LonePair({id(self)}, {self._atom})"


class SingleElectron(_SingleAtomContainer):
    """Unpaired electron located on one atom."""

    def __init__(self, atom: Optional[Atom] = None):
        super().__init__(atom, electron_count=1)

    def __str__(self) -> str:
        return f"SingleElectron({id(self)}, {self._atom})"
