"""I/O layer: execution of compiled statements against a backing store."""
