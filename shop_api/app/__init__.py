"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each domain (products, users, orders, games) exposes a
router defined in ``api/v1/endpoints`` backed by a service in
``services``.  Configuration, logging, password hashing, error
handling and MongoDB access live in ``core``.
"""

from .main import app  # noqa: F401
