"""
Core utilities shared across usermgr.

This package hosts configuration helpers (env vars, paths) and the logging
setup used by the store, services and console.
"""
