"""
API route modules for the Storefront validation service.
"""
