"""
Shared exceptions and view decorators.
"""
