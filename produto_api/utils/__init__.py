# produto_api/utils/__init__.py
