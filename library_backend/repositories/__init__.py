"""Accessor interfaces and implementations.

This package defines abstract accessor interfaces for the domain entities and
the SQLite adapters under :mod:`library_backend.repositories.sqlite`. Single-row
reads return ``None`` for a missing row; only the services turn absence into
:class:`~library_backend.domain.exceptions.NotFoundError`.
"""
