"""
Storage layer.

``base`` declares the contracts the services depend on, ``errors``
the exceptions a store may raise and ``memory`` the in‑process
implementation used by the application.  A durable store only has
to satisfy the protocols in ``base`` to replace the in‑memory one.
"""
