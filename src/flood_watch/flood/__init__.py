"""Flood forecast retrieval, risk classification and snapshot publication."""
