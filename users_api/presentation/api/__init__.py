"""API module - application-wide HTTP middleware.

Route handlers live under ``presentation/routers``.
"""
