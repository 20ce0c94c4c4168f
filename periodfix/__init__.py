"""periodfix: ISO-8601 date periods between calendar dates."""
