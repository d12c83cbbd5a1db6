"""Record filtering layer.

This module applies optional named criteria to in-memory record collections.
It keeps filtering logic reusable across the SDK and CLI flows.
"""
