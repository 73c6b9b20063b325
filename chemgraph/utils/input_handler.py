"""Input handler for converting various formats to AtomContainer."""

from typing import Dict, Hashable, Union

import networkx as nx
from rdkit import Chem

from chemgraph.core.atom import Atom
from chemgraph.core.atom_container import AtomContainer
from chemgraph.core.electron_container import (
    Bond,
    BondOrder,
    BondStereo,
    SingleElectron,
)

BOND_TYPE_ORDERS = {
    "SINGLE": BondOrder.SINGLE,
    "AROMATIC": BondOrder.AROMATIC,
    "DOUBLE": BondOrder.DOUBLE,
    "TRIPLE": BondOrder.TRIPLE,
}

_RDKIT_BOND_STEREO = {
    Chem.BondDir.BEGINWEDGE: BondStereo.UP,
    Chem.BondDir.BEGINDASH: BondStereo.DOWN,
    Chem.BondDir.UNKNOWN: BondStereo.UNDEFINED,
}


def convert_to_atom_container(
    input_data: Union[str, Chem.Mol, nx.Graph, AtomContainer],
) -> AtomContainer:
    """Convert various input formats to AtomContainer.

    Args:
        input_data: Input in one of the following formats:
            - SMILES string
            - RDKit Mol object
            - NetworkX Graph
            - AtomContainer

    Returns:
        AtomContainer: Converted atom container

    Raises:
        ValueError: If input format is not supported or conversion fails
    """
    if isinstance(input_data, AtomContainer):
        return input_data

    if isinstance(input_data, str):
        # Assume SMILES string
        mol = Chem.MolFromSmiles(input_data)
        if mol is None:
            raise ValueError(f"Failed to parse SMILES string: {input_data}")
        return from_rdkit_mol(mol)

    if isinstance(input_data, Chem.Mol):
        return from_rdkit_mol(input_data)

    if isinstance(input_data, nx.Graph):
        return _convert_networkx_to_atom_container(input_data)

    raise ValueError(f"Unsupported input type: {type(input_data)}")


def from_rdkit_mol(mol: Chem.Mol) -> AtomContainer:
    """Create an AtomContainer from an RDKit molecule.

    Radical electrons become SingleElectron containers on their atom.

    Args:
        mol: RDKit molecule object.

    Returns:
        AtomContainer: A new container with one atom per RDKit atom, in
            RDKit index order.
    """
    if mol is None:
        raise ValueError("Input molecule cannot be None")

    container = AtomContainer()

    for rd_atom in mol.GetAtoms():
        charge = 0.0
        if rd_atom.HasProp("_GasteigerCharge"):
            charge = rd_atom.GetDoubleProp("_GasteigerCharge")
        container.add_atom(
            Atom(
                rd_atom.GetSymbol(),
                charge=charge,
                formal_charge=rd_atom.GetFormalCharge(),
            )
        )

    for rd_bond in mol.GetBonds():
        container.add_bond(
            rd_bond.GetBeginAtomIdx(),
            rd_bond.GetEndAtomIdx(),
            rd_bond.GetBondTypeAsDouble(),
            _RDKIT_BOND_STEREO.get(rd_bond.GetBondDir(), BondStereo.NONE),
        )

    for rd_atom in mol.GetAtoms():
        for _ in range(rd_atom.GetNumRadicalElectrons()):
            container.add_single_electron(rd_atom.GetIdx())

    return container


def _convert_networkx_to_atom_container(graph: nx.Graph) -> AtomContainer:
    """Convert NetworkX graph to AtomContainer.

    Args:
        graph: NetworkX graph with node and edge attributes

    Returns:
        AtomContainer: Converted atom container, atoms in node order

    Raises:
        ValueError: If required attributes are missing
    """
    container = AtomContainer()
    atoms: Dict[Hashable, Atom] = {}

    # Convert nodes
    for node_id in graph.nodes():
        attrs = graph.nodes[node_id]

        # Required attributes
        if "symbol" not in attrs:
            raise ValueError(f"Node {node_id} missing required 'symbol' attribute")

        atom = Atom(
            attrs["symbol"],
            charge=attrs.get("charge", 0.0),
            formal_charge=attrs.get("formal_charge", 0),
        )
        atoms[node_id] = atom
        container.add_atom(atom)

    # Convert edges
    for u, v, attrs in graph.edges(data=True):
        if "order" in attrs:
            order = float(attrs["order"])
        else:
            bond_type = attrs.get("bond_type", "SINGLE")
            if bond_type not in BOND_TYPE_ORDERS:
                raise ValueError(f"Edge ({u}, {v}) has unknown bond type {bond_type}")
            order = BOND_TYPE_ORDERS[bond_type]

        container.add_bond(
            Bond(atoms[u], atoms[v], order, attrs.get("stereo", BondStereo.NONE))
        )

    return container
