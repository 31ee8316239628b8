"""
High-level use cases for Placebook.

Each service module orchestrates repositories/adapters to implement the
application rules (add a place, look one up, build map previews). Routers and
scripts call these services instead of touching the database directly.
"""
