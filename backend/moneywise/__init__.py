"""Moneywise personal finance backend.

Transactions, budgets, goals and categories are stored per owner; insights and
analytics are pure computations over the stored transactions.
"""
