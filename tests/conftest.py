"""Shared pytest configuration."""

import matplotlib

# Headless backend for the matplotlib tests
matplotlib.use("Agg")
