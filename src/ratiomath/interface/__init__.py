"""Interface subpackage.

This package keeps __init__ lightweight to avoid import cycles.
Use explicit imports from `ratiomath.interface.cli`.
"""

__all__ = ["cli"]
