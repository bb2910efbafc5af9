"""Evaluation engine: dispatch loop, special forms, macro and quasiquote
expansion, and the optional evaluation-metadata side channel."""
