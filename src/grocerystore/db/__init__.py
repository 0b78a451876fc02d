"""Database access for GroceryStore."""
