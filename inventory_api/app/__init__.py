"""
Inventory API application package.

Layers, leaf first: ``storage`` (in‑memory stores and their
contracts), ``services`` (user and product business logic), ``api``
(FastAPI routers).  ``main.create_app`` wires them together.
"""
