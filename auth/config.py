"""
Configuration for the auth module.

Rejection messages are part of the public API (clients and tests match on
them), so they live here rather than inline.

Note:
    "Authorization Header value not provided" and "Incorrect credentials
    provided" differ, so a client can tell a missing header from a bad one.
    Unknown username and wrong password deliberately share one message.
"""

MISSING_HEADER = "Authorization Header value not provided"
INCORRECT_CREDENTIALS = "Incorrect credentials provided"
INVALID_LOGIN = "Invalid username or password"

AUTH_HEADER = "Authorization"
CHALLENGE = {"WWW-Authenticate": "Basic"}
