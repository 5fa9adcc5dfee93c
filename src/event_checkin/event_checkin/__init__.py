"""Event Check-In package.

Organised by feature modules (sessions, employees, checkins, ...) with a thin
Flask controller layer over service/repository layers. Every dataset lives as
one JSON document in a key-value record store.
"""
