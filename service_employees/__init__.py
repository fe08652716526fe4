"""Employees service: CRUD over the in-memory employee collection."""
