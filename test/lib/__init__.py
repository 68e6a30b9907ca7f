"""
Tests for the library modules of the fileformat package.
"""
