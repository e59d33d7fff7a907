"""
models/ - Domain Models
=======================
Plain dataclasses holding the values read from or written to the database.
"""
