"""Static asset build for the Okta documentation theme."""

__version__ = "0.1.0"
