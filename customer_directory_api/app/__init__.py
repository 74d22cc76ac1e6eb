"""
Application package initializer.

Contains the main entrypoint for the API and its submodules: ``core``
(configuration, logging, store access), ``schemas``, ``services`` and
the versioned routers under ``api``.
"""

from .main import app  # noqa: F401
