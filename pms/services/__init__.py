"""Business rules layered over the database client."""
