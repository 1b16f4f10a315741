"""Storefront checkout — product capabilities, shopping cart, and checkout.

The checkout engine validates a cart against current stock, expiry and the
customer's balance, then prices, ships and settles it in one call. Every
failure is raised before any state is touched.
"""
