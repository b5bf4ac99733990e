# produto_api/api/routers/__init__.py
