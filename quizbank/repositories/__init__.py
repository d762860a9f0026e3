"""
Persistence adapters for the question collection.

Every backend implements the QuestionStore contract from ``base``; routers
depend on that contract and never touch the file or the table directly.
"""
