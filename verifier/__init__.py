"""Verifier liveness service."""
