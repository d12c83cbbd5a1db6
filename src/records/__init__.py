"""Record collection sources.

This module builds the built-in sample collections and loads
caller-supplied collections from YAML record files.
"""
