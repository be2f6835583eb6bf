"""
Core infrastructure shared by all modules: errors, logging and settings.
"""
