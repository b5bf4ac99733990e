"""Produto API - CRUD produktow na FastAPI + SQLAlchemy."""
__version__ = "1.0.0"
