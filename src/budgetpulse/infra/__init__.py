"""Backend infrastructure: database engine and SQLModel repositories."""
