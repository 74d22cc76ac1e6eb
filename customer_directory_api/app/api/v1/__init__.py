"""Version 1 of the Customer Directory API."""
