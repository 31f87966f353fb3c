"""Job board core: store access, search and posting services."""
