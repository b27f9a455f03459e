"""
models/ - Domain Layer
======================
Plain dataclasses for the records the API manages.
Each model knows how to present itself in the JSON shape the API returns.
"""
