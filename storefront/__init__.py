"""
Storefront request validation.

Named request schemas for a typical e-commerce backend (users, products,
reviews, cart, orders, payments) and the validation gate that applies them.
"""

__version__ = "0.1.0"
