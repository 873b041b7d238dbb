"""
core.array_algos is for algorithms that operate on NumPy arrays and
other array-like collections.

These should:

- Assume that arguments have already been validated and type-checked.
- Not import from core.algorithms.
"""
