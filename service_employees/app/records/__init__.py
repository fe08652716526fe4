"""Employee records: data models and the manager operating on them."""
