"""
liftsim core tests

Data model, request registry, direction policy, motion, door cycle,
boarding and the dispatch loop.
"""
