"""Core Layer: pure resource rules, no IO, no DB.

Invariants:
    - No module in core/ imports from api/, infrastructure/, models/, or db/
    - Functions in car.py are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: stores and routes call
      into core for id assignment, field checks, and response shaping
"""
