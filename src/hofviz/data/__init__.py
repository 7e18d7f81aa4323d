"""
hofviz Data Package (Imperative Shell)

This package handles all file I/O for the inductee dataset.

Modules:
- reader: CSV loading, normalisation and validation
"""

from .reader import DatasetLoadError, load_inductees

__all__ = [
    'DatasetLoadError',
    'load_inductees',
]
