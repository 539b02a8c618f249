"""Routing — append-only route table with exact (method, path) matching.

Routes and middleware are registered during setup and read on every
request. Lookup is a linear scan; the first registered match wins.
"""
