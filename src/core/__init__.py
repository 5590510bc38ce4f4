"""
Core containers, mathematical primitives, and contracts.

Fixed-length numeric vectors, read-only views over them, and the
folds they reduce with. Independent of any I/O or external system.
"""
