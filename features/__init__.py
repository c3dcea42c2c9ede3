# features/__init__.py
