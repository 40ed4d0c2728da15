# ==============================================
# SERIALIZATION (EDMX)
# ==============================================
#
# This package turns metadata models into .edmx XML and back.
# Stores delegate all byte-level work to it.
#
# Modules:
# --------
# - edmx_writer.py  → ModelDescriptor → XML
# - edmx_reader.py  → XML → ModelDescriptor / CompiledModel
#
# ==============================================

from .edmx_writer import build_edmx_tree, write_edmx, to_edmx_bytes
from .edmx_reader import read_descriptor, read_edmx

__all__ = [
    "build_edmx_tree",
    "write_edmx",
    "to_edmx_bytes",
    "read_descriptor",
    "read_edmx",
]
