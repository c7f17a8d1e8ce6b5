"""Helpers shared by the resolver and the framework integration.

Modules:
- fields: safe probing and coercion of descriptor fields and headers.
- network: Starlette/ASGI connection adapters and get_client_ip().
"""
