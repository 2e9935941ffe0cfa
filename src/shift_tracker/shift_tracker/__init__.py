"""Shift Tracker package.

This package is organized by feature modules (staff, shifts, persistence, ...)
with a thin command/Flask layer on top of the ShiftEngine orchestrator.
"""
