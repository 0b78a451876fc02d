"""GroceryStore: grocery inventory manager."""
__version__ = "0.1.0"
