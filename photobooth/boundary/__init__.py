"""
Boundary layer for external system integrations.

Handles all interactions with external systems: the relational database
and the local filesystem photo store.
"""
