"""SQL statement rendering."""
