"""Vendor adapters. Import the submodule you need; each pulls in its SDK."""
