"""Mock users and roles API package.

Serves in-memory, seeded collections of users and roles over HTTP while
injecting latency and random server faults.
"""
