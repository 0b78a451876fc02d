"""Utilities for GroceryStore."""
