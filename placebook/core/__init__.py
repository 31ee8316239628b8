"""
Core utilities shared across Placebook.

This package hosts configuration helpers (env vars, endpoints, credentials)
and logging setup. Repositories, services and routers depend on these
primitives instead of reading os.environ directly.
"""
