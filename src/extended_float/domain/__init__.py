"""Domain model of validated floats: tables, width policies, value objects."""
