"""CLI command modules.

This package contains:
- devices: Device commands (devices, dim)
- sensors: Sensor commands (sensors, sensor)
- setup: Command group class and the authorize command
- helpers: Client construction shared by commands
"""
