"""Size-type lattice, ChainedList and list cursors."""
