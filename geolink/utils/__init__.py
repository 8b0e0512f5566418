"""Shared utilities for geolink."""
