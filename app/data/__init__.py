"""
Data access layer.

Design rules:
- Views call ONLY functions in this package.
- Every load returns a typed LoadResult; failures never raise into a view.
- No env var reads here (config-only).
"""
