"""Utility helpers shared across AITK."""
