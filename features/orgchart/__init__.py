# features/orgchart/__init__.py
