"""
Version 1 of the API.

This subpackage bundles the product, user, order, game catalog and
demonstration document endpoints.
"""
