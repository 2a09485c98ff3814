"""Domain models: value kinds and the StoredValue storage representation."""
