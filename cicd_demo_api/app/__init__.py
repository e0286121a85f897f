"""
Application package initializer.

The application is organised into layers: ``core`` (configuration,
logging, errors and the in-memory store), ``schemas`` (request and
response models), ``services`` (business rules) and ``api`` (HTTP
routes).  ``main`` wires them together.
"""

from .main import app, create_app  # noqa: F401
