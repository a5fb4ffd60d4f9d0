"""Cipher lab services."""
