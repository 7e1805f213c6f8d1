"""Paddock - identity service of the equestrian marketplace.

Presentation layer (HTTP API and CLI) on top of paddock_identity,
paddock_auth and paddock_config.
"""

__version__ = "0.1.0"
