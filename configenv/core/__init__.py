"""Shared error types and Result helpers for configenv."""
