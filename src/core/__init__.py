"""
Core domain models, mathematical primitives, and contracts.

This module contains the combinatorial function library and the value types
it exchanges with the application layer. It has no I/O and no shared state.
"""
