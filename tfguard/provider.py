"""Cloud providers that checks apply to."""

from __future__ import annotations

from enum import Enum

_DISPLAY_NAMES = {
    "aws": "AWS",
    "digitalocean": "Digital Ocean",
    "openstack": "OpenStack",
    "cloudstack": "Cloudstack",
}


class Provider(str, Enum):
    """The provider that a check applies to."""

    UNKNOWN = ""
    AWS = "aws"
    AZURE = "azure"
    CUSTOM = "custom"
    DIGITALOCEAN = "digitalocean"
    GENERAL = "general"
    GITHUB = "github"
    GOOGLE = "google"
    KUBERNETES = "kubernetes"
    ORACLE = "oracle"
    OPENSTACK = "openstack"
    CLOUDSTACK = "cloudstack"

    def __str__(self) -> str:
        return self.value

    def display_name(self) -> str:
        """Human-readable name of the provider."""
        try:
            return _DISPLAY_NAMES[self.value]
        except KeyError:
            return self.value.lower().title()

    def const_name(self) -> str:
        """Display name with the spaces removed."""
        return self.display_name().replace(" ", "")


def rule_provider_to_string(provider: Provider | str) -> str:
    """Upper-case form of a provider name."""
    value = provider.value if isinstance(provider, Provider) else provider
    return value.upper()