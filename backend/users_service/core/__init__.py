# users_service/core/__init__.py
"""
Core application modules.
Contains essential infrastructure components:
- authz: Principal and the authorization policy
- bootstrap: Role seeding and default admin creation
- db: Database configuration, connection management and storage error translation
- errors: HTTP translation of service exceptions
- exceptions: Typed service failures
- security: Password hashing, token issuance and validation
"""
