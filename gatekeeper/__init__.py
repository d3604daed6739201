"""Gatekeeper: bearer-token, signed-cookie, and JWT session authentication demo service."""
