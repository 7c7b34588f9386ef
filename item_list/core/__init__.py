"""Core Layer — pure derivation logic, no IO, no subscriptions.

Invariants:
    - No module in core/ imports from services/, schemas/, or infrastructure/
    - All stage functions are pure and deterministic

Design Decisions:
    - Functional core separated from the reactive shell: the engine in services/
      only decides WHEN to derive, core/ decides WHAT is derived
"""
