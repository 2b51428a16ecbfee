"""Infrastructure layer - database, logging and fault injection."""
