"""
Roster App - Higher-order collection utilities for student rosters

Iterate, test, search and transform ordered sequences of student records
with each/all/any/contains/index_of/filter/reject/pluck, plus typed
record construction, roster queries and grade validation.
"""

__version__ = "0.1.0"
__author__ = "Roster App Team"
