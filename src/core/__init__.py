"""
Core matrix kernel: domain model, numeric algorithms, and serialization contracts.

This module contains the foundational building blocks that are independent
of any user interface (menus, files, terminals).
"""
