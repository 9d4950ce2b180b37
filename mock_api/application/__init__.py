"""Application layer: the query engine and the use cases."""
