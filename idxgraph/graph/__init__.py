"""Graph primitives and helpers.

This package provides the append-only indexed graph `IndexedDiGraph`, argument
validation helpers (`validation`) and NetworkX conversion (`convert`).
"""
