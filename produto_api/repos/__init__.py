# produto_api/repos/__init__.py
