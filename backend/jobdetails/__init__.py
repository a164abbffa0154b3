"""Application package for the job details CRUD backend.

This package exposes the resource, service, repository and model modules
used by the FastAPI application. It is intentionally lightweight;
individual modules contain the concrete implementations and documentation.
"""
