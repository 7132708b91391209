"""
Shared test fixtures and configuration.
"""

import pytest
import os
import sys
from datetime import datetime, timezone
from unittest.mock import MagicMock

# Add the parent directory to the path so we can import the pstore package
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pstore.ssm.client import SsmClient


def make_descriptor(name, param_type="String", last_modified=None):
    """Build a DescribeParameters entry."""
    return {
        "Name": name,
        "Type": param_type,
        "LastModifiedDate": last_modified or datetime(2023, 5, 15, 10, 30, 0, tzinfo=timezone.utc),
    }


class MockSsm:
    """Mock boto3 SSM client serving fixed pages and values."""

    def __init__(self, pages, values=None):
        """
        Args:
            pages: List of (descriptors, next_token) tuples
            values: Map of parameter name to value
        """
        self.pages = pages
        self.values = values or {}
        self.tokens = {None: 0}
        for index, (_, token) in enumerate(pages[:-1]):
            self.tokens[token] = index + 1

        self.describe_parameters = MagicMock(side_effect=self._describe)
        self.get_parameter = MagicMock(side_effect=self._get)
        self.put_parameter = MagicMock(return_value={"Version": 1})
        self.delete_parameter = MagicMock(return_value={})

    def _describe(self, NextToken=None):
        descriptors, token = self.pages[self.tokens[NextToken]]
        response = {"Parameters": descriptors}
        if token:
            response["NextToken"] = token
        return response

    def _get(self, Name, WithDecryption=False):
        param_type = next(
            d["Type"] for descriptors, _ in self.pages for d in descriptors if d["Name"] == Name
        )
        return {"Parameter": {"Name": Name, "Type": param_type, "Value": self.values.get(Name, f"value-of-{Name}")}}


@pytest.fixture
def two_page_ssm():
    """Mock SSM client with two pages of two parameters (T1 -> T2 -> end)."""
    return MockSsm(
        pages=[
            ([make_descriptor("app/host", "StringList"), make_descriptor("db_password", "SecureString")], "T1"),
            ([make_descriptor("region"), make_descriptor("api_key", "SecureString")], "T2"),
            ([], None),
        ],
        values={
            "app/host": "a.example.com,b.example.com",
            "db_password": "hunter2",
            "region": "ap-northeast-1",
            "api_key": "sk-123456",
        },
    )


@pytest.fixture
def two_page_client(two_page_ssm):
    """SsmClient wrapping the two page mock."""
    return SsmClient(two_page_ssm)


@pytest.fixture
def mock_ssm_factory():
    """Return the MockSsm class and descriptor helper for custom page layouts."""
    return MockSsm, make_descriptor
