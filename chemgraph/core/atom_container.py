"""Mutable container of atoms and electron containers."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Union

from chemgraph.core.atom import Atom, AtomParity
from chemgraph.core.chem_object import ChemObject, ChemObjectChangeEvent
from chemgraph.core.electron_container import (
    Bond,
    BondOrder,
    BondStereo,
    ElectronContainer,
    LonePair,
    SingleElectron,
)
from chemgraph.errors import AtomContainerIndexError, CloneError

logger = logging.getLogger(__name__)

# Reported by get_minimum_bond_order for atoms without any bond. Kept as the
# historical value; an unbonded atom arguably has no minimum at all.
MINIMUM_BOND_ORDER_SENTINEL = 6.0


class AtomContainer(ChemObject):
    """Ordered store of atoms and electron containers forming a molecular graph.

    The container holds references, not copies: the same atom or bond may live
    in several containers. Containment is decided by identity. The container
    listens to every element it holds and re-broadcasts their changes to its
    own listeners.

    The container is not thread-safe; concurrent mutation must be serialized
    by the caller.
    """

    def __init__(self, container: Optional[AtomContainer] = None):
        """Initialize the container.

        Args:
            container: Optional container whose atoms and electron containers
                are shared into the new one (shallow copy).
        """
        super().__init__()
        self._atoms: List[Atom] = []
        self._electron_containers: List[ElectronContainer] = []
        self._atom_parities: Dict[Atom, AtomParity] = {}

        if container is not None:
            self.add(container)

    # Listener hook

    def state_changed(self, event: ChemObjectChangeEvent) -> None:
        """Forward a change of a contained element to this container's listeners.

        Args:
            event: Event fired by the element.
        """
        self.notify_changed(event)

    def _register(self, element: ChemObject) -> None:
        element.add_listener(self)

    def _unregister(self, element: ChemObject) -> None:
        element.remove_listener(self)

    def _release(self, element: ChemObject, storage: List) -> None:
        # The same element may sit in more than one slot.
        if not any(stored is element for stored in storage):
            self._unregister(element)

    # Counts and bounds

    @property
    def atom_count(self) -> int:
        """Number of atoms in the container."""
        return len(self._atoms)

    @property
    def electron_container_count(self) -> int:
        """Number of electron containers in the container."""
        return len(self._electron_containers)

    @property
    def bond_count(self) -> int:
        """Number of bonds among the electron containers."""
        return sum(1 for ec in self._electron_containers if isinstance(ec, Bond))

    @property
    def lone_pair_count(self) -> int:
        """Number of lone pairs among the electron containers."""
        return sum(1 for ec in self._electron_containers if isinstance(ec, LonePair))

    def _check_atom_index(self, position: int) -> None:
        if not 0 <= position < len(self._atoms):
            raise AtomContainerIndexError(
                f"Atom position {position} out of range [0, {len(self._atoms)})",
                context={"position": position, "atom_count": len(self._atoms)},
            )

    def _check_electron_container_index(self, position: int) -> None:
        count = len(self._electron_containers)
        if not 0 <= position < count:
            raise AtomContainerIndexError(
                f"Electron container position {position} out of range [0, {count})",
                context={"position": position, "electron_container_count": count},
            )

    # Element views

    @property
    def atoms(self) -> List[Atom]:
        """Copy of the atom list in storage order."""
        return list(self._atoms)

    @property
    def electron_containers(self) -> List[ElectronContainer]:
        """Copy of the electron container list in storage order."""
        return list(self._electron_containers)

    @property
    def bonds(self) -> List[Bond]:
        """All bonds in storage order."""
        return [ec for ec in self._electron_containers if isinstance(ec, Bond)]

    @property
    def lone_pairs(self) -> List[LonePair]:
        """All lone pairs in storage order."""
        return [ec for ec in self._electron_containers if isinstance(ec, LonePair)]

    def get_lone_pairs(self, atom: Atom) -> List[LonePair]:
        """Get the lone pairs located on an atom.

        Args:
            atom: Atom to inspect.

        Returns:
            Lone pairs on the atom, in storage order.
        """
        return [
            ec
            for ec in self._electron_containers
            if isinstance(ec, LonePair) and ec.contains(atom)
        ]

    def get_single_electrons(self, atom: Atom) -> List[SingleElectron]:
        """Get the single electrons located on an atom.

        Args:
            atom: Atom to inspect.

        Returns:
            Single electrons on the atom, in storage order.
        """
        return [
            ec
            for ec in self._electron_containers
            if isinstance(ec, SingleElectron) and ec.contains(atom)
        ]

    # Positional access

    def get_atom_at(self, position: int) -> Atom:
        """Get the atom at a position.

        Args:
            position: Index in [0, atom_count).

        Returns:
            The atom stored at that position.

        Raises:
            AtomContainerIndexError: If the position is out of range.
        """
        self._check_atom_index(position)
        return self._atoms[position]

    def get_electron_container_at(self, position: int) -> ElectronContainer:
        """Get the electron container at a position.

        Args:
            position: Index in [0, electron_container_count).

        Returns:
            The electron container stored at that position.

        Raises:
            AtomContainerIndexError: If the position is out of range.
        """
        self._check_electron_container_index(position)
        return self._electron_containers[position]

    def get_bond_at(self, position: int) -> Bond:
        """Get the electron container at a position, which must be a bond."""
        electron_container = self.get_electron_container_at(position)
        if not isinstance(electron_container, Bond):
            raise TypeError(
                f"Electron container at {position} is a "
                f"{type(electron_container).__name__}, not a Bond"
            )
        return electron_container

    def get_first_atom(self) -> Atom:
        """Get the atom at position 0.

        Raises:
            AtomContainerIndexError: If the container has no atoms.
        """
        return self.get_atom_at(0)

    def get_last_atom(self) -> Atom:
        """Get the atom at the last position.

        Raises:
            AtomContainerIndexError: If the container has no atoms.
        """
        return self.get_atom_at(len(self._atoms) - 1)

    def set_atom_at(self, position: int, atom: Atom) -> None:
        """Replace the atom at a position.

        The replaced atom stops being listened to unless it is still stored at
        another position.

        Args:
            position: Index in [0, atom_count).
            atom: Atom to store.
        """
        self._check_atom_index(position)
        replaced = self._atoms[position]
        self._atoms[position] = atom
        self._release(replaced, self._atoms)
        self._register(atom)
        self.notify_changed()

    def set_electron_container_at(
        self, position: int, electron_container: ElectronContainer
    ) -> None:
        """Replace the electron container at a position.

        Args:
            position: Index in [0, electron_container_count).
            electron_container: Electron container to store.
        """
        self._check_electron_container_index(position)
        replaced = self._electron_containers[position]
        self._electron_containers[position] = electron_container
        self._release(replaced, self._electron_containers)
        self._register(electron_container)
        self.notify_changed()

    def set_atoms(self, atoms: Sequence[Atom]) -> None:
        """Replace all atoms of the container.

        Args:
            atoms: New atoms, in storage order.
        """
        for atom in self._atoms:
            self._unregister(atom)
        self._atoms = list(atoms)
        for atom in self._atoms:
            self._register(atom)
        self.notify_changed()

    def set_electron_containers(
        self, electron_containers: Sequence[ElectronContainer]
    ) -> None:
        """Replace all electron containers of the container.

        Args:
            electron_containers: New electron containers, in storage order.
        """
        for electron_container in self._electron_containers:
            self._unregister(electron_container)
        self._electron_containers = list(electron_containers)
        for electron_container in self._electron_containers:
            self._register(electron_container)
        self.notify_changed()

    # Lookup

    def get_atom_number(self, atom: Atom) -> int:
        """Get the position of an atom.

        Args:
            atom: Atom to look for.

        Returns:
            Position of the atom, or -1 if it is not in the container.
        """
        for position, stored in enumerate(self._atoms):
            if stored is atom:
                return position
        return -1

    def get_bond_number(self, bond: Optional[Bond]) -> int:
        """Get the position of a bond among the electron containers.

        Args:
            bond: Bond to look for.

        Returns:
            Position of the bond, or -1 if it is not in the container.
        """
        if bond is None:
            return -1
        for position, stored in enumerate(self._electron_containers):
            if stored is bond:
                return position
        return -1

    def get_bond_number_between(self, atom1: Atom, atom2: Atom) -> int:
        """Get the position of the bond joining two atoms.

        Args:
            atom1: First atom.
            atom2: Second atom.

        Returns:
            Position of the bond, or -1 if the atoms are not bonded here.
        """
        return self.get_bond_number(self.get_bond(atom1, atom2))

    def contains(self, element: Union[Atom, ElectronContainer]) -> bool:
        """Check whether an atom or electron container is stored here.

        Args:
            element: Atom or electron container.

        Returns:
            True if this exact object is in the container.
        """
        if isinstance(element, ElectronContainer):
            pool = self._electron_containers
        else:
            pool = self._atoms
        return any(stored is element for stored in pool)

    def get_bond(self, atom1: Atom, atom2: Atom) -> Optional[Bond]:
        """Get the bond joining two atoms.

        Args:
            atom1: First atom.
            atom2: Second atom.

        Returns:
            First bond in storage order joining the atoms, None if absent.
        """
        for electron_container in self._electron_containers:
            if (
                isinstance(electron_container, Bond)
                and electron_container.contains(atom1)
                and electron_container.get_connected_atom(atom1) is atom2
            ):
                return electron_container
        return None

    # Connectivity

    def get_connected_atoms(self, atom: Atom) -> List[Atom]:
        """Get the atoms bonded to an atom.

        Args:
            atom: Atom whose neighbours are wanted.

        Returns:
            The partner atom of every incident bond, in bond storage order.
        """
        return [
            bond.get_connected_atom(atom) for bond in self.get_connected_bonds(atom)
        ]

    def get_connected_bonds(self, atom: Atom) -> List[Bond]:
        """Get the bonds that contain an atom.

        Args:
            atom: Atom to inspect.

        Returns:
            Incident bonds in storage order.
        """
        return [
            ec
            for ec in self._electron_containers
            if isinstance(ec, Bond) and ec.contains(atom)
        ]

    def get_connected_electron_containers(self, atom: Atom) -> List[ElectronContainer]:
        """Get every bond, lone pair and single electron touching an atom.

        Args:
            atom: Atom to inspect.

        Returns:
            Electron containers in storage order.
        """
        return [
            ec
            for ec in self._electron_containers
            if isinstance(ec, (Bond, LonePair, SingleElectron)) and ec.contains(atom)
        ]

    def get_bond_count(self, atom: Union[Atom, int]) -> int:
        """Count the bonds of an atom.

        Args:
            atom: Atom, or position of the atom.

        Returns:
            Number of incident bonds.
        """
        if isinstance(atom, int):
            atom = self.get_atom_at(atom)
        return len(self.get_connected_bonds(atom))

    def get_lone_pair_count(self, atom: Atom) -> int:
        """Count the lone pairs located on an atom."""
        return len(self.get_lone_pairs(atom))

    def get_single_electron_sum(self, atom: Atom) -> int:
        """Count the single electrons located on an atom.

        Args:
            atom: Atom to inspect.

        Returns:
            Number of unpaired electrons on the atom.
        """
        return len(self.get_single_electrons(atom))

    def get_bond_order_sum(self, atom: Atom) -> float:
        """Sum the orders of all bonds of an atom.

        Args:
            atom: Atom to inspect.

        Returns:
            Sum of incident bond orders, without rounding.
        """
        total = 0.0
        for bond in self.get_connected_bonds(atom):
            total += bond.order
        return total

    def get_maximum_bond_order(self, atom: Atom) -> float:
        """Get the highest incident bond order, 0.0 when the atom has no bonds."""
        maximum = 0.0
        for bond in self.get_connected_bonds(atom):
            if bond.order > maximum:
                maximum = bond.order
        return maximum

    def get_minimum_bond_order(self, atom: Atom) -> float:
        """Get the lowest incident bond order.

        Args:
            atom: Atom to inspect.

        Returns:
            Lowest incident bond order, or MINIMUM_BOND_ORDER_SENTINEL when
            the atom has no bonds.
        """
        minimum = MINIMUM_BOND_ORDER_SENTINEL
        for bond in self.get_connected_bonds(atom):
            if bond.order < minimum:
                minimum = bond.order
        return minimum

    # Parities

    def add_atom_parity(self, parity: AtomParity) -> None:
        """Attach a parity to its atom, replacing any earlier one.

        Args:
            parity: Parity to store.
        """
        self._atom_parities[parity.atom] = parity

    def get_atom_parity(self, atom: Atom) -> Optional[AtomParity]:
        """Get the parity recorded for an atom, or None if there is none."""
        return self._atom_parities.get(atom)

    # Adding

    def add_atom(self, atom: Atom) -> None:
        """Append an atom. Adding an atom already present does nothing.

        Args:
            atom: Atom to add.
        """
        if self.contains(atom):
            return
        self._register(atom)
        self._atoms.append(atom)
        self.notify_changed()

    def add_electron_container(self, electron_container: ElectronContainer) -> None:
        """Append an electron container. Adding one already present does nothing.

        The atoms it refers to are not added.

        Args:
            electron_container: Bond, lone pair or single electron to add.
        """
        if self.contains(electron_container):
            return
        self._register(electron_container)
        self._electron_containers.append(electron_container)
        self.notify_changed()

    def add_bond(
        self,
        bond: Union[Bond, int],
        atom2: Optional[int] = None,
        order: float = BondOrder.SINGLE,
        stereo: int = BondStereo.NONE,
    ) -> None:
        """Add a bond, either given directly or built from two atom positions.

        Called as ``add_bond(bond)`` or ``add_bond(i, j, order, stereo)``.
        The positional form always creates a new bond, even if the two atoms
        are already bonded.

        Args:
            bond: Bond to add, or position of the first atom.
            atom2: Position of the second atom for the positional form.
            order: Bond order for the positional form.
            stereo: Stereo descriptor for the positional form.

        Raises:
            AtomContainerIndexError: If an atom position is out of range.
        """
        if isinstance(bond, Bond):
            self.add_electron_container(bond)
            return
        if atom2 is None:
            raise TypeError("add_bond needs a Bond or two atom positions")
        new_bond = Bond(self.get_atom_at(bond), self.get_atom_at(atom2), order, stereo)
        self.add_electron_container(new_bond)

    def add_lone_pair(self, position: int) -> None:
        """Place a new lone pair on the atom at a position."""
        self.add_electron_container(LonePair(self.get_atom_at(position)))

    def add_single_electron(self, position: int) -> None:
        """Place a new single electron on the atom at a position."""
        self.add_electron_container(SingleElectron(self.get_atom_at(position)))

    def add(self, container: AtomContainer) -> None:
        """Share all atoms and electron containers of another container.

        Args:
            container: Container to merge into this one.
        """
        for atom in container.atoms:
            self.add_atom(atom)
        for electron_container in container.electron_containers:
            self.add_electron_container(electron_container)
        self.notify_changed()

    def add_electron_containers(self, container: AtomContainer) -> None:
        """Add the electron containers of another container, skipping ones already here.

        Args:
            container: Container whose electron containers are shared into this one.
        """
        for electron_container in container.electron_containers:
            self.add_electron_container(electron_container)
        self.notify_changed()

    # Removing

    def remove_atom_at(self, position: int) -> Atom:
        """Remove the atom at a position, shifting later atoms left.

        Electron containers touching the atom are left in place.

        Args:
            position: Index in [0, atom_count).

        Returns:
            The removed atom.
        """
        self._check_atom_index(position)
        atom = self._atoms.pop(position)
        self._release(atom, self._atoms)
        self.notify_changed()
        return atom

    def remove_atom(self, atom: Atom) -> None:
        """Remove an atom without touching its electron containers.

        Removing an atom that is not present only fires a notification.

        Args:
            atom: Atom to remove.
        """
        position = self.get_atom_number(atom)
        if position == -1:
            self.notify_changed()
            return
        self.remove_atom_at(position)

    def remove_atom_and_connected_electron_containers(self, atom: Atom) -> None:
        """Remove an atom together with every bond, lone pair and single electron on it.

        Args:
            atom: Atom to remove.
        """
        position = self.get_atom_number(atom)
        if position != -1:
            connected = self.get_connected_electron_containers(atom)
            logger.debug(
                "Removing atom %d with %d connected electron containers",
                position,
                len(connected),
            )
            for electron_container in connected:
                self.remove_electron_container(electron_container)
            self.remove_atom_at(position)
        self.notify_changed()

    def remove_electron_container_at(self, position: int) -> ElectronContainer:
        """Remove the electron container at a position.

        Args:
            position: Index in [0, electron_container_count).

        Returns:
            The removed electron container.
        """
        self._check_electron_container_index(position)
        electron_container = self._electron_containers.pop(position)
        self._release(electron_container, self._electron_containers)
        self.notify_changed()
        return electron_container

    def remove_electron_container(
        self, electron_container: ElectronContainer
    ) -> Optional[ElectronContainer]:
        """Remove an electron container.

        Args:
            electron_container: Electron container to remove.

        Returns:
            The removed electron container, or None if it was not present.
        """
        for position in range(len(self._electron_containers) - 1, -1, -1):
            if self._electron_containers[position] is electron_container:
                return self.remove_electron_container_at(position)
        self.notify_changed()
        return None

    def remove_bond(self, atom1: Atom, atom2: Atom) -> Optional[Bond]:
        """Remove the bond joining two atoms.

        Args:
            atom1: First atom.
            atom2: Second atom.

        Returns:
            The removed bond, or None if the atoms are not bonded.
        """
        bond = self.get_bond(atom1, atom2)
        if bond is None:
            return None
        return self.remove_electron_container(bond)

    def remove(self, container: AtomContainer) -> None:
        """Remove every atom and electron container of another container."""
        for atom in container.atoms:
            self.remove_atom(atom)
        for electron_container in container.electron_containers:
            self.remove_electron_container(electron_container)
        self.notify_changed()

    def remove_all_elements(self) -> None:
        """Remove all atoms and electron containers."""
        for atom in self._atoms:
            self._unregister(atom)
        for electron_container in self._electron_containers:
            self._unregister(electron_container)
        self._atoms = []
        self._electron_containers = []
        self.notify_changed()

    def remove_all_electron_containers(self) -> None:
        """Remove all bonds, lone pairs and single electrons."""
        for electron_container in self._electron_containers:
            self._unregister(electron_container)
        self._electron_containers = []
        self.notify_changed()

    def remove_all_bonds(self) -> None:
        """Remove all bonds, keeping lone pairs and single electrons."""
        for bond in self.bonds:
            self.remove_electron_container(bond)
        self.notify_changed()

    # Derived containers

    def get_intersection(self, container: AtomContainer) -> AtomContainer:
        """Build a container of the elements shared with another container.

        Sharing means the very same objects, not equivalent structure.

        Args:
            container: Container to intersect with.

        Returns:
            New container holding this container's atoms and electron
            containers that ``container`` also holds, in this container's order.
        """
        intersection = AtomContainer()
        for atom in self._atoms:
            if container.contains(atom):
                intersection.add_atom(atom)
        for electron_container in self._electron_containers:
            if container.contains(electron_container):
                intersection.add_electron_container(electron_container)
        return intersection

    def clone(self) -> AtomContainer:
        """Deep copy the container.

        Every atom and electron container is duplicated. Endpoints of the
        duplicated bonds, lone pairs and single electrons are rebound to the
        cloned atom found at the same position as the original endpoint.

        Returns:
            New container sharing no elements with this one.

        Raises:
            CloneError: If an element cannot be duplicated or refers to an
                atom that is not in this container.
        """
        clone = super().clone()
        clone._atoms = []
        clone._electron_containers = []
        clone._atom_parities = {}

        for position, atom in enumerate(self._atoms):
            try:
                clone.add_atom(atom.clone())
            except Exception as exc:
                raise CloneError(
                    f"Could not clone atom at position {position}",
                    context={"position": position},
                ) from exc

        for position, electron_container in enumerate(self._electron_containers):
            try:
                new_container = self._clone_electron_container(
                    electron_container, clone
                )
            except Exception as exc:
                raise CloneError(
                    f"Could not clone electron container at position {position}",
                    context={"position": position},
                ) from exc
            clone.add_electron_container(new_container)

        for atom, parity in self._atom_parities.items():
            position = self.get_atom_number(atom)
            if position != -1:
                clone.add_atom_parity(
                    AtomParity(clone.get_atom_at(position), parity.parity)
                )

        logger.debug(
            "Cloned container with %d atoms and %d electron containers",
            clone.atom_count,
            clone.electron_container_count,
        )
        return clone

    def _clone_electron_container(
        self, electron_container: ElectronContainer, clone: AtomContainer
    ) -> ElectronContainer:
        """Duplicate one electron container and rebind it to the clone's atoms.

        Args:
            electron_container: Original electron container.
            clone: Container whose atoms the copy must point at.

        Returns:
            The duplicated electron container.
        """
        new_container = electron_container.clone()
        if isinstance(electron_container, Bond):
            new_container.set_atoms(
                [
                    clone.get_atom_at(self.get_atom_number(atom))
                    for atom in electron_container.atoms
                ]
            )
        elif isinstance(electron_container, (LonePair, SingleElectron)):
            new_container.atom = clone.get_atom_at(
                self.get_atom_number(electron_container.atom)
            )
        return new_container

    def __str__(self) -> str:
        parts = [
            f"AtomContainer({id(self)}",
            f"#A:{self.atom_count}",
            f"#EC:{self.electron_container_count}",
        ]
        parts.extend(str(atom) for atom in self._atoms)
        parts.extend(str(ec) for ec in self._electron_containers)
        parities = ", ".join(str(parity) for parity in self._atom_parities.values())
        parts.append(f"AP:[#{len(self._atom_parities)}, {parities}])")
        return ", ".join(parts)
