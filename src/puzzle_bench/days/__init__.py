"""Bundled puzzle solvers."""
