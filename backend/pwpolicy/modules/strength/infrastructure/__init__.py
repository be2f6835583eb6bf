"""
Strength Infrastructure

Loading of external reference data for the strength domain.
"""

from .common_passwords import CommonPasswordCatalogue

__all__ = ["CommonPasswordCatalogue"]
