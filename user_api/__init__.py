"""用户 CRUD API"""

__version__ = "1.0.0"
