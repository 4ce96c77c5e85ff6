"""
Bundled roster data.

Literal student records for examples and tests.
"""
