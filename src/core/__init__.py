"""
Core domain models, fixed-point primitives, contracts and errors.

This module contains the foundational building blocks that are independent
of external systems (transport, signer, exchange API).
"""
