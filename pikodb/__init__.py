"""A pico-sized in-memory vector database with HNSW search and JSON file persistence."""

__version__ = "0.0.16"