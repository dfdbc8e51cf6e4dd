"""orpc — value objects and content-descriptor builders for OpenRPC documents.

Two families of components:
1. Content descriptor builders — produce the `params` entries of a method
   (sparse fieldsets, filters, relationships, sorts, pagination, payload)
2. Value objects — immutable records mirroring every OpenRPC 1.2.x object
"""

__version__ = "1.0.2"
