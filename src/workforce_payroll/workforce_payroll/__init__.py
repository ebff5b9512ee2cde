"""Workforce Payroll package.

Organized by feature modules (schedules, attendance, payroll, ...) with a thin
Flask controller layer over pure services. The productivity engine turns one
worker's punch records into a daily attendance classification, worked-time
accounting and a prorated salary.
"""
