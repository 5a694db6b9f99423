"""hc-swap: switch between installed versions of HashiCorp CLI tools."""

__version__ = "0.3.0"
