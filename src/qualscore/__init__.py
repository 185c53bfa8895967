"""Qualification scoring and validation engine for management-team due diligence."""

__version__ = "0.1.0"
