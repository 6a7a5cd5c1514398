"""
Registrar: student records and course registration.

An in-memory model of student academic records and a course-registration
ledger that validates enrollment against deadlines, capacities and
prerequisites.
"""

import logging

__version__ = "1.0.0"
__author__ = "Registrar Development Team"
__description__ = "Student records and course registration"

logging.getLogger(__name__).addHandler(logging.NullHandler())
