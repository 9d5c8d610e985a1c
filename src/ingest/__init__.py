"""Statpedia ingestion pipeline.

This module reads the raw spreadsheet exports and parses them into
typed character, vehicle, and track records for the store layer.
"""
