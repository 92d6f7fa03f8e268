"""
Top‑level package for the Inventory API.

Marks ``inventory_api`` as a package so that modules within ``app``
can be imported with fully qualified names such as
``inventory_api.app.main``, both from ``run.py`` and from the test
suite.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
