"""Record shop inventory: record store, editor sessions, and HTTP API."""
