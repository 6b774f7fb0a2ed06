"""Tuition Center package.

This package is organized by feature modules (students, finance, center, ...)
with a thin Flask controller layer and SOLID service/repository layers.
"""
