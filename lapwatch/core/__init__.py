"""Core Layer — pure timing and numeric logic, no IO, no logging, no environment.

Invariants:
    - No module in core/ imports from infrastructure/, config, or cli at import time
    - The only side effect core code performs is reading an injected clock

Design Decisions:
    - Functional core separated from imperative shell: the CLI and the real clock
      live outside core/ and are handed in at the boundary
"""
