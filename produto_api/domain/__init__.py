# produto_api/domain/__init__.py
