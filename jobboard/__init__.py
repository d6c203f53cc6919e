"""Job board backend: job role listings, applications and status sweeps."""
