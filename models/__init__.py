"""Domain objects and utility functions.

This package contains:
- device: Device (name, dim level)
- sensor: Sensor (name, last update, readings)
- types: Credentials, ServiceOptions and API payload types
- utils: Level conversions and argument parsing
"""
