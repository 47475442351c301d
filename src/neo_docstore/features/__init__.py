"""Feature modules for neo-docstore."""
