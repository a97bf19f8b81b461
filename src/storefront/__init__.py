"""Storefront — in-memory retail checkout built on a single Protean bounded context."""
