"""
AWS Credential Resolver

This module turns a ClientConfig into a boto3 session carrying the right
credentials: a named profile from the shared credentials files, temporary
credentials from an assumed role, or the default credential chain.
"""

import logging
import time
from typing import Any, Dict, Optional

import boto3
from botocore.credentials import RefreshableCredentials
from botocore.exceptions import BotoCoreError, ClientError, ProfileNotFound
from botocore.session import get_session

from ..config import ClientConfig, CredentialMode
from ..errors import CredentialError

__all__ = [
    'resolve',
    'profile_session',
    'assume_role_session',
    'default_session',
]

logger = logging.getLogger(__name__)


def profile_session(profile_name: str) -> boto3.Session:
    """
    Create a session that reads credentials for a named profile.

    Args:
        profile_name: Profile name in ~/.aws/credentials or ~/.aws/config

    Returns:
        boto3.Session: Session bound to the profile
    """
    try:
        return boto3.Session(profile_name=profile_name)
    except ProfileNotFound as e:
        raise CredentialError(f"Profile '{profile_name}' not found") from e


def _role_session_name() -> str:
    return f"pstore-{time.time_ns()}"


def assume_role_session(role_arn: str, region: Optional[str] = None) -> boto3.Session:
    """
    Create a session whose credentials come from assuming a role.

    The role is assumed with the default session. Credentials are wrapped
    in botocore's RefreshableCredentials so they are renewed on expiry.

    Args:
        role_arn: ARN of the role to assume
        region: Region of the STS endpoint

    Returns:
        boto3.Session: Session using the assumed role credentials
    """
    try:
        sts = boto3.Session().client("sts", region_name=region)
    except (BotoCoreError, ClientError) as e:
        raise CredentialError(f"Could not create STS client: {e}") from e
    session_name = _role_session_name()

    def refresh() -> Dict[str, Any]:
        logger.debug("Assuming role %s as %s", role_arn, session_name)
        try:
            response = sts.assume_role(RoleArn=role_arn, RoleSessionName=session_name)
        except (ClientError, BotoCoreError) as e:
            raise CredentialError(f"Could not assume role {role_arn}: {e}") from e
        creds = response["Credentials"]
        return {
            "access_key": creds["AccessKeyId"],
            "secret_key": creds["SecretAccessKey"],
            "token": creds["SessionToken"],
            "expiry_time": creds["Expiration"].isoformat(),
        }

    credentials = RefreshableCredentials.create_from_metadata(
        metadata=refresh(),
        refresh_using=refresh,
        method="sts-assume-role",
    )
    botocore_session = get_session()
    # botocore has no public setter for refreshable credentials on a session
    botocore_session._credentials = credentials
    return boto3.Session(botocore_session=botocore_session)


def default_session() -> boto3.Session:
    """Create a session using the default credential chain."""
    try:
        return boto3.Session()
    except (BotoCoreError, ClientError) as e:
        raise CredentialError(f"Could not load default credentials: {e}") from e


def resolve(config: ClientConfig) -> boto3.Session:
    """
    Resolve the credential provider for a client configuration.

    Args:
        config: Client configuration

    Returns:
        boto3.Session: Session carrying the resolved credentials
    """
    logger.debug("Resolving credentials (mode=%s)", config.credential_mode.value)

    if config.credential_mode is CredentialMode.PROFILE and config.profile_or_role_value:
        return profile_session(config.profile_or_role_value)
    if config.credential_mode is CredentialMode.ROLE and config.profile_or_role_value:
        return assume_role_session(config.profile_or_role_value, config.region)
    return default_session()
