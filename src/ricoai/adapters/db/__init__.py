"""Database plumbing shared by the relational adapters."""
