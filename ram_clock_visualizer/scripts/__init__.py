"""Helper scripts (demo data generation)."""
