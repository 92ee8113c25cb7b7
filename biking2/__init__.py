"""biking2 backend."""
