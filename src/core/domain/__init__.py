"""Domain models.

Plain data structures (Pydantic v2) for the manifest and its entries. The
domain does not know about files, the CLI or JSON formatting.
"""
