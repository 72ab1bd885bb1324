"""Immutable HTTP types: Request, Headers, Response, Redirect."""
