"""Tooling for reading and checking a Doctrine style-guide corpus."""
