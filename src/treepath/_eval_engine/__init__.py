"""Evaluation engine module for treepath.

This module provides the recursive property path evaluator and the entry
functions built on top of it.

Key types:
- PathEvaluator: Interprets a path graph against a data graph
- evaluate_path: Flattened terms reached by a declared path
- evaluate_path_mappings: The same evaluation, one mapping per result branch
"""

from ._engine import PathEvaluator, evaluate_path, evaluate_path_mappings

__all__ = [
    "PathEvaluator",
    "evaluate_path",
    "evaluate_path_mappings",
]
