"""
Core data models for chef-helpers.

A Node is the only structure that moves between the directory layer
and the policy helpers.
"""

from .node import Node, DEFAULT_ENVIRONMENT, deep_merge

__all__ = ["Node", "DEFAULT_ENVIRONMENT", "deep_merge"]
