"""Adapters connecting the evaluator to external GA engines."""
