"""
Pure string helpers: sanitisation, checksum validation and formatting.
"""
