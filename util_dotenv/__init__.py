"""Helpers for keeping `.env` files and their `.env.example` templates in sync."""

__version__ = "0.1.0"
