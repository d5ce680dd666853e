"""Resolver package for the GraphQL schema."""
