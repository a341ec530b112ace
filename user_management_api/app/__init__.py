"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules: ``core`` (configuration, logging, errors and the in-memory
store), ``schemas`` (request and response models), ``services``
(business rules) and ``api`` (versioned HTTP routers).
"""

from .main import app  # noqa: F401
