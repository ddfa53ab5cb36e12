"""Supporting services for hashreg (logging)."""
