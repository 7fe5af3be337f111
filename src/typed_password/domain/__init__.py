"""Domain layer - password types and the ports they need.

This layer contains the algorithm markers, value objects, enums and
protocols. It has NO dependency on bcrypt or any other infrastructure.

Structure:
- algorithms.py: static algorithm markers (Bcrypt)
- value_objects/: Pass, Salt, PassHash, BcryptParams (immutable)
- enums/: PassCheck
- errors/: error message constants for Result failures
- protocols/: hashing, randomness and logging ports
"""
