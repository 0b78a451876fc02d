"""Configuration package for GroceryStore."""
