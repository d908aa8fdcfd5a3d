"""Utility helpers for taskpad."""
