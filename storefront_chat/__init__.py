"""Zava Storefront chat relay service."""
