"""
API Routers - Organized endpoint handlers for the fest admin API.

- registrations: list, edit, delete and export fest registrations
"""
