"""Payroll Admin package.

This package is organized by feature modules (employees, attendance, advances,
payments, settings, payroll) with a thin Flask controller layer over
service/repository layers. The payroll engine itself is pure and does no I/O.
"""
