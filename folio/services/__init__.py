"""Domain services: each mutating function stages its change plus one audit entry and commits once."""
