"""Core application components.

This module provides the foundational components for the onboarding API:
- Application settings and configuration
"""
