"""Waste Report API."""
