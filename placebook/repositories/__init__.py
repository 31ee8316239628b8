"""
Persistence adapters.

These modules encapsulate how places are stored and retrieved. Services depend
on the repository objects handed to them instead of opening the database
themselves.
"""
