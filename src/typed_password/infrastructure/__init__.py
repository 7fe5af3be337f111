"""Infrastructure adapters.

Concrete implementations of the domain protocols:
- logging/: structlog console adapter (LoggerProtocol)
- security/: bcrypt hashing service, OS random source, hash codec
"""
