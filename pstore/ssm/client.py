"""
SSM Parameter Store client

Thin wrapper around the boto3 SSM client exposing the four operations the
tool needs. Every botocore failure is re-raised as a RemoteCallError; no
retries are attempted beyond botocore's own.
"""

import logging
from typing import Any, Dict, Iterator, Optional, Tuple

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ..errors import RemoteCallError

__all__ = [
    'SsmClient',
    'new_client',
    'has_more_pages',
]

logger = logging.getLogger(__name__)


def has_more_pages(response: Dict[str, Any]) -> bool:
    """
    Check whether a DescribeParameters response has a following page.

    A missing, None or empty NextToken means there are no more pages.

    Args:
        response: A DescribeParameters response

    Returns:
        bool: True if another page should be requested
    """
    return bool(response.get("NextToken"))


class SsmClient:
    """
    Parameter Store operations bound to one region and endpoint.
    """

    def __init__(self, ssm: Any):
        """
        Initialize the client.

        Args:
            ssm: A boto3 SSM client (or anything with the same methods)
        """
        self.ssm = ssm

    def _call(self, operation: str, **kwargs) -> Dict[str, Any]:
        try:
            return getattr(self.ssm, operation)(**kwargs)
        except (ClientError, BotoCoreError) as e:
            raise RemoteCallError(operation, str(e)) from e

    def describe_pages(self) -> Iterator[Dict[str, Any]]:
        """
        Lazily fetch DescribeParameters pages.

        The continuation token of each page is passed to the next request
        until has_more_pages reports that the listing is exhausted.

        Yields:
            Dict[str, Any]: One DescribeParameters response per page
        """
        kwargs: Dict[str, Any] = {}
        page = 0
        while True:
            page += 1
            logger.debug("Describing parameters, page %d", page)
            response = self._call("describe_parameters", **kwargs)
            yield response
            if not has_more_pages(response):
                break
            kwargs["NextToken"] = response["NextToken"]

    def describe_all(self) -> Iterator[Dict[str, Any]]:
        """
        Lazily iterate over every parameter descriptor.

        Yields:
            Dict[str, Any]: Parameter metadata (Name, Type, LastModifiedDate, ...)
        """
        for response in self.describe_pages():
            yield from response.get("Parameters", [])

    def get_value(self, name: str) -> Tuple[str, str]:
        """
        Get the current value of a parameter, decrypting secure strings.

        Args:
            name: Parameter name

        Returns:
            Tuple[str, str]: The value and the parameter type
        """
        response = self._call("get_parameter", Name=name, WithDecryption=True)
        parameter = response["Parameter"]
        return parameter.get("Value", ""), parameter.get("Type", "")

    def put(self, name: str, param_type: str, value: str, overwrite: bool = False) -> None:
        """
        Create or update a parameter.

        Args:
            name: Parameter name, also used as its description
            param_type: String, StringList or SecureString
            value: Parameter value
            overwrite: Replace an existing parameter of the same name
        """
        logger.debug("Putting %s (%s, overwrite=%s)", name, param_type, overwrite)
        self._call(
            "put_parameter",
            Name=name,
            Value=value,
            Description=name,
            Type=param_type,
            Overwrite=overwrite,
        )

    def delete(self, name: str) -> None:
        """
        Delete a parameter.

        Args:
            name: Parameter name
        """
        logger.debug("Deleting %s", name)
        self._call("delete_parameter", Name=name)


def new_client(region: str, endpoint: Optional[str], session: boto3.Session) -> SsmClient:
    """
    Create an SsmClient.

    Args:
        region: AWS region name
        endpoint: Custom endpoint URL, or None for the default endpoint
        session: Session carrying the credentials to use

    Returns:
        SsmClient: The client
    """
    try:
        ssm = session.client("ssm", region_name=region, endpoint_url=endpoint or None)
    except (ClientError, BotoCoreError, ValueError) as e:
        raise RemoteCallError("create_client", str(e)) from e
    return SsmClient(ssm)
