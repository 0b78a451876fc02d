"""Domain types and errors for GroceryStore."""
