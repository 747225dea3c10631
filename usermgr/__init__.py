"""usermgr: terminal CRUD manager for users and their posts stored in a JSON file."""

__version__ = "1.0.0"
