"""Employee Management System package.

This package is organized by feature modules (employees, attendance, leaves,
payroll, ...) with a thin Flask controller layer on top of service and
repository layers.
"""
