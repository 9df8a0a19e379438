"""Aggregate reporting over persisted users.

This module buckets stored ages into fixed groups and renders
the console report printed after a CSV upload.
"""
