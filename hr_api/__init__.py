"""HR management API package.

Holds the domain, application, infrastructure and interface layers of the
service. Nothing is re-exported here.
"""
