"""Service layer helpers used by the blueprints and CLI."""
