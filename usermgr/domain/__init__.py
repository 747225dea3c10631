"""Domain types (users, posts) and their JSON shapes."""
