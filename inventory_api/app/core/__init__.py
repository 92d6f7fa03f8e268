"""
Cross‑cutting helpers: settings, logging, token/password primitives
and the domain error taxonomy shared by services and routers.
"""
