"""Metadata rule evaluation."""
