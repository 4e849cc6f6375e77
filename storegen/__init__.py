"""
Command-line wrapper for bulk e-commerce store data generation.

This package parses generation commands (products, orders, customers,
coupons, taxonomy terms), delegates the actual generation to a pluggable
generator backend, and reports progress and elapsed time.
"""

__version__ = "0.1.0"
