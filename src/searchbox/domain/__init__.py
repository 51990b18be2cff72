"""Domain layer - suggestion types, outbound actions and collaborator protocols.

This layer contains:
- types: categories, suggestions and the actions a submission produces
- protocols: interfaces of the external services the search box talks to
- exceptions: domain-specific exceptions

The domain layer has NO dependencies on application or presentation layers.
"""
