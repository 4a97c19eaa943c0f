"""Pure domain logic and repository interfaces."""
