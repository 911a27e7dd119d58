"""
Core utilities — application exceptions shared by the scanner, API server and entrypoint.
"""
