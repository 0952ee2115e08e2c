"""
Release build configuration from local property files.
"""

__version__ = '0.1.0'
