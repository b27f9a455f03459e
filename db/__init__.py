"""
db/ - Database Layer
====================
Holds the pooled PostgreSQL gateway and the schema bootstrap script.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
