"""GraphQL schema and execution tests."""
