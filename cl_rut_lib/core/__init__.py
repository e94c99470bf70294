"""
Constants shared by the cl‑rut modules.
"""
