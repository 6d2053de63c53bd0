"""Core infrastructure shared by every layer.

Contains the Result types, error taxonomy, settings and the validation
rule-set primitives. Nothing here imports from domain/application.
"""
