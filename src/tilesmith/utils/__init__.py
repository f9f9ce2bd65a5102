"""Utility helpers for tilesmith."""
