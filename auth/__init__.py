"""
Auth package for the Restaurant Explorer API.

Provides HTTP Basic Authentication for FastAPI:
    - utils:        credential codec (encode/decode the Authorization header value)
    - service:      credential verification and login
    - dependencies: the request-level auth gate and the `public` route marker
"""
