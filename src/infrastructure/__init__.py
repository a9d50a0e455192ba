"""Infrastructure Layer.

Adapters implementing domain ports over external services (HTTP).
"""
