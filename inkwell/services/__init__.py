"""Services — imperative shell around core/ logic; owns transactions and SQL.

Invariants:
    - One service instance per AsyncSession (per request)
    - Every multi-step write commits once, or rolls back entirely
"""
