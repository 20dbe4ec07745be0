"""Packaged GraphQL query templates."""
