"""Infrastructure Layer — real time source and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from core/ domain logic beyond value types
    - Everything here touches the process: clocks, handlers, streams
"""
