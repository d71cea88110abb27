"""Infrastructure Layer — file storage and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All file IO errors mapped to StorageError (core/errors.py)
"""
