"""Attendance Console package.

Browser admin console for an attendance backend, organized by feature modules
(departments, employees, attendance, dashboard) with a thin Flask controller
layer over services and HTTP-backed repositories.
"""
