"""Core functionality for Telldus Live.

This package contains:
- client: TelldusClient request layer and device/sensor factories
- auth: OAuth 1.0a signed client and authorisation flow
- config: Credentials file loading and saving
- errors: Exception types
"""
