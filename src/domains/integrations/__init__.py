"""Third-party integrations domain.

This module manages integrations with external accounting systems:
- PowerOfficeGo client onboarding (authorization handshake and callback)
"""
