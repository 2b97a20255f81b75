"""Root-level pytest configuration; places the project root on the import path."""
