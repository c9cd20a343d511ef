"""
Use cases for the mall directory API.

Each service receives a store, runs the load/filter/mutate/save cycle and
raises ``ServiceError`` subclasses for request-level failures. Routers call
these services instead of manipulating the document directly.
"""
