"""
API package containing the HTTP routes.

``router.py`` exposes ``api_router`` (mounted under ``/api``) and
``system_router`` (mounted at the root).  Domain-specific routes live
in the ``endpoints`` subpackage.
"""
