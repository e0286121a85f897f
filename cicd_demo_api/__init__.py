"""
Top-level package for the CI/CD Demo API.

All functionality lives in submodules: the web service under ``app``
and the deployment verification client in ``client``.
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
