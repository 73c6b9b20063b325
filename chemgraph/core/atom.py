"""Atom and atom parity representations."""

from __future__ import annotations

from typing import Optional

from chemgraph.core.chem_object import ChemObject


class Atom(ChemObject):
    """Identity-bearing vertex of a molecular graph.

    Two atoms with the same symbol and charges are still different atoms;
    containers compare atoms by identity only.
    """

    def __init__(
        self, symbol: Optional[str] = None, charge: float = 0.0, formal_charge: int = 0
    ):
        """Initialize an atom.

        Args:
            symbol: Element symbol, e.g. "C".
            charge: Partial charge.
            formal_charge: Formal charge.
        """
        super().__init__()
        self._symbol = symbol
        self._charge = float(charge)
        self._formal_charge = int(formal_charge)

    @property
    def symbol(self) -> Optional[str]:
        return self._symbol

    @symbol.setter
    def symbol(self, value: Optional[str]) -> None:
        self._symbol = value
        self.notify_changed()

    @property
    def charge(self) -> float:
        """Partial charge of the atom."""
        return self._charge

    @charge.setter
    def charge(self, value: float) -> None:
        self._charge = float(value)
        self.notify_changed()

    @property
    def formal_charge(self) -> int:
        return self._formal_charge

    @formal_charge.setter
    def formal_charge(self, value: int) -> None:
        self._formal_charge = int(value)
        self.notify_changed()

    def __str__(self) -> str:
        return (
            f"Atom({id(self)}, S:{self._symbol}, "
            f"C:{self._charge}, FC:{self._formal_charge})"
        )


class AtomParity:
    """Parity descriptor attached to a single atom."""

    def __init__(self, atom: Atom, parity: int):
        """Initialize the parity.

        Args:
            atom: Atom the parity belongs to.
            parity: Parity value, conventionally -1, 0 or 1.
        """
        self.atom = atom
        self.parity = parity

    def __str__(self) -> str:
        return f"AtomParity(#M:{self.parity}, {self.atom})"
