"""
High-level use cases for usermgr.

Service modules orchestrate the store to implement the directory rules
(create with welcome posts, update with pinned fields, search, statistics).
The console calls these services instead of manipulating the JSON file.
"""
