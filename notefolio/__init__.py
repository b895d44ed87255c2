"""
Notefolio.

- backend/: REST API, domain services, database models, configuration
"""
