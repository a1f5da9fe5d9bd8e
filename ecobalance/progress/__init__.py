"""
Progress evaluator.

Modules
-------
badges    : Badge catalog and guarded progress formula.
levels    : Score bands and tier display metadata.
evaluator : calculate_progress() + streak / total-saved helpers.
"""
