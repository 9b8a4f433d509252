"""Interfaces web : API REST et API GraphQL."""
