"""Services for GroceryStore."""
