"""
AWS credential resolution for the Parameter Store client.
"""

from .credentials import (
    resolve,
    profile_session,
    assume_role_session,
    default_session,
)
