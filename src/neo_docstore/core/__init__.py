"""Core building blocks shared by every neo-docstore feature."""
