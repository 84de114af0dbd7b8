"""
Service layer abstraction.

``UserService`` owns every read and write against the store; the log
filter is kept as a pure function so it can be exercised without a
database.
"""
