"""
Pydantic models describing RUT parts and generator options.
"""
