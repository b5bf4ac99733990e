# produto_api/api/__init__.py
