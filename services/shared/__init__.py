"""Helpers shared by the catalog service and the storefront."""
