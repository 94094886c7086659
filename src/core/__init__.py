"""
Core calendar arithmetic, domain models, and input contracts.

This module contains the foundational building blocks that are independent
of any presentation layer (forms, rendering, timers).
"""
