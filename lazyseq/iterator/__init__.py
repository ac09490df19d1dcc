"""Pull-iterator protocol, sources, transforms and chaining."""
