"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for a specific domain entity.
Repositories receive the shared Database at construction and return domain model objects,
or a failure signal (None for reads, False for writes) when the database call fails.
"""
