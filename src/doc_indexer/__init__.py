"""doc-indexer — fetch stored documents, chunk them and index them for retrieval."""

__version__ = "0.1.0"
