"""Shared generate → extract → validate → fallback pipeline for study items."""
