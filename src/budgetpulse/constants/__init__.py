"""Static lookup tables shared by forms, templates and services."""
