# -*- coding: utf-8 -*-
"""
Command-line entry points (run with `python -m cli.<name>`):

- run_single : one start -> one goal, animated, single_target_report.txt
- run_multi  : ordered goal sequence, animated, performance_report.txt
"""
__all__ = [
    "run_single",
    "run_multi",
]
