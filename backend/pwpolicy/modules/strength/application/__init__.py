"""
Strength Application Layer

Assembly of password policies from caller-supplied options.
"""

from .policy_builder import PolicyBuilder

__all__ = ["PolicyBuilder"]
