"""Quiz assessment runtime packages."""
