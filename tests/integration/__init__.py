"""
Integration tests for RecordQuery.

These tests exercise complete filter, group and reduce chains over
larger, heterogeneous record sets.
"""
