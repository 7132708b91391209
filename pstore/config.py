"""
Invocation configuration.

Flags are read once at startup into a frozen CliArgs, and the client
settings are derived from it as a frozen ClientConfig. Both are passed
explicitly to the components that need them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

DEFAULT_REGION = "ap-northeast-1"


class CredentialMode(Enum):
    """How the remote client obtains credentials."""
    NONE = "none"
    PROFILE = "profile"
    ROLE = "role"


@dataclass(frozen=True)
class ClientConfig:
    """Settings needed to build a credential provider and an SSM client."""
    region: str = DEFAULT_REGION
    endpoint: Optional[str] = None
    credential_mode: CredentialMode = CredentialMode.NONE
    profile_or_role_value: str = ""


@dataclass(frozen=True)
class CliArgs:
    """Immutable snapshot of the command line flags."""
    profile: str = ""
    role: str = ""
    region: str = DEFAULT_REGION
    endpoint: str = ""
    version: bool = False
    csv: bool = False
    json: bool = False
    put: bool = False
    name: str = ""
    value: str = ""
    overwrite: bool = False
    secure: bool = False
    list: bool = False
    delete: bool = False
    debug: bool = False

    def client_config(self) -> ClientConfig:
        """
        Build the client configuration for these flags.

        A profile takes precedence over a role. When neither is given the
        default credential chain is used.

        Returns:
            ClientConfig: The derived client configuration
        """
        if self.profile:
            mode, value = CredentialMode.PROFILE, self.profile
        elif self.role:
            mode, value = CredentialMode.ROLE, self.role
        else:
            mode, value = CredentialMode.NONE, ""

        return ClientConfig(
            region=self.region,
            endpoint=self.endpoint or None,
            credential_mode=mode,
            profile_or_role_value=value,
        )
