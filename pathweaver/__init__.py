"""Graph algorithms (cycles, Hamiltonian cycles, spanning trees, components,
shortest paths) and gold-collecting tour heuristics."""

__version__ = "0.1.0"

__all__ = ["__version__"]