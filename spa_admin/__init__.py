"""
Spa administration core.

In-memory store, mutation commands and dashboard derivations for a small
spa/clinic: clients with clinical skin records, appointments, inventory and
cash transactions.
"""

__version__ = "0.1.0"
