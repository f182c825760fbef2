"""I/O utilities for tubesweep."""

from .mesh_json import read_mesh_json, write_mesh_json

__all__ = ['read_mesh_json', 'write_mesh_json']
