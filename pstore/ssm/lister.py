"""
Parameter Lister

Collects every parameter in the store into display records. Listing costs
one DescribeParameters call per page plus one GetParameter call per
parameter; values are fetched one at a time, in enumeration order.
"""

import logging
from dataclasses import asdict, dataclass
from datetime import datetime, timedelta, timezone
from typing import Dict, List

from .client import SsmClient

__all__ = [
    'ParameterRecord',
    'REDACTED_VALUE',
    'SECURE_STRING',
    'DISPLAY_TIMEZONE',
    'format_timestamp',
    'list_all',
]

logger = logging.getLogger(__name__)

SECURE_STRING = "SecureString"
REDACTED_VALUE = "******************"
DISPLAY_TIMEZONE = timezone(timedelta(hours=9), "Asia/Tokyo")
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class ParameterRecord:
    """One parameter as shown to the user."""
    name: str
    value: str
    type: str
    last_modified: str

    def as_row(self) -> List[str]:
        """Return the record as a Name, Value, Type, LastModifiedDate row."""
        return [self.name, self.value, self.type, self.last_modified]

    def as_dict(self) -> Dict[str, str]:
        """Return the record with its JSON key names."""
        data = asdict(self)
        data["last_modified_date"] = data.pop("last_modified")
        return data


def format_timestamp(value: datetime) -> str:
    """
    Format a Parameter Store timestamp in the display time zone.

    Args:
        value: Timestamp from the API; naive values are taken as UTC

    Returns:
        str: The time as YYYY-MM-DD HH:MM:SS in UTC+9
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(DISPLAY_TIMEZONE).strftime(TIMESTAMP_FORMAT)


def _build_record(client: SsmClient, descriptor: Dict) -> ParameterRecord:
    name = descriptor["Name"]
    param_type = descriptor.get("Type", "")

    logger.debug("Getting value of %s", name)
    value, value_type = client.get_value(name)
    if SECURE_STRING in (param_type, value_type):
        value = REDACTED_VALUE

    last_modified = descriptor.get("LastModifiedDate")
    return ParameterRecord(
        name=name,
        value=value,
        type=param_type,
        last_modified=format_timestamp(last_modified) if last_modified else "",
    )


def list_all(client: SsmClient) -> List[ParameterRecord]:
    """
    List every parameter with its current value.

    Secure values are replaced with REDACTED_VALUE before the record is
    built. Any failure aborts the whole listing.

    Args:
        client: Parameter Store client

    Returns:
        List[ParameterRecord]: Records in the order the store enumerated them
    """
    records = [_build_record(client, d) for d in client.describe_all()]
    logger.debug("Listed %d parameters", len(records))
    return records
