"""Graph module: CSR graph model, input validation, and synthetic families."""

from resdist.graph.build import build_graph_model, graph_from_edge_list
from resdist.graph.generators import GENERATORS, generate_synthetic_graph
from resdist.graph.types import EdgeList, GraphModel
from resdist.graph.validation import (
    InvalidGraphError,
    InvalidParameterError,
    check_absorbing,
    check_edge_arrays,
    check_nodes,
    check_rmax,
    check_walk_params,
)

__all__ = [
    "EdgeList",
    "GENERATORS",
    "GraphModel",
    "InvalidGraphError",
    "InvalidParameterError",
    "build_graph_model",
    "check_absorbing",
    "check_edge_arrays",
    "check_nodes",
    "check_rmax",
    "check_walk_params",
    "generate_synthetic_graph",
    "graph_from_edge_list",
]
