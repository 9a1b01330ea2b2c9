"""Shared domain layer for guest declaration documents."""
