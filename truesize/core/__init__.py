"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Named constants (clamp bounds, dead zone, palette, catalog keys)
- exceptions: Custom exception hierarchy
"""
