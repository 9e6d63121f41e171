"""Flood risk aggregation service."""
