"""
Tests for the structural format readers.
"""
