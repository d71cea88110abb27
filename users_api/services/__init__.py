"""Services — the imperative shell around core/users.py.

Invariants:
    - Every operation is load → (mutate → save) → return, with no state kept between calls
"""
