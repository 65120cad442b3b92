"""
Centralized Audit Logging System

Tracks who moved which tenant where, and when.
"""
