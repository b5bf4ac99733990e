# produto_api/data/__init__.py
