"""Appointment booking between clients and service providers."""
