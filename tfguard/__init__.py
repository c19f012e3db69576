"""Providers, severities, rule matching, root-module discovery and result filtering for Terraform security scanning."""

__version__ = "0.1.0"
__all__ = ["provider", "severity", "rule", "scanner"]