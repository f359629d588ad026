"""
favorites-store

Persistence layer for customers, products and the customers' favorite products.
"""

__version__ = "0.1.0"
