"""Routes REST de l'application."""
