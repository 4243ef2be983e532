"""Workforce attendance package.

Organized by feature modules (attendance, leave, holidays, payroll) with a thin
Flask controller layer on top of pure calculators and source/repository layers.
"""
