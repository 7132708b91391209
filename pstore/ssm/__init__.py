"""
SSM Parameter Store access: the API client and the parameter lister.
"""

from .client import SsmClient, new_client, has_more_pages
from .lister import ParameterRecord, REDACTED_VALUE, format_timestamp, list_all

__all__ = [
    'SsmClient',
    'new_client',
    'has_more_pages',
    'ParameterRecord',
    'REDACTED_VALUE',
    'format_timestamp',
    'list_all',
]
