"""Shared helpers: logging setup and SPDX lookups."""
