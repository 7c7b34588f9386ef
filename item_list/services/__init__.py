"""Services Layer — reactive wiring around the pure core.

Invariants:
    - Services own subscriptions; core functions never see them
"""
