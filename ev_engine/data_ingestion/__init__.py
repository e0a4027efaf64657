"""Tabular data helpers for the EV efficiency engine."""
