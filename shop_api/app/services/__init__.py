"""
Service layer.

Each service encapsulates the business logic for one domain and is
constructed with the database handle created at startup, so that
API handlers never reach for a global connection.  Pricing and the
external game catalog live here as well.
"""
