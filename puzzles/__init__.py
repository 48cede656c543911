"""
Daily puzzle solutions.

Every module exposes parse_input(text), part_one(...) and part_two(...);
day 25 has a single part.
Modules are independent of each other.
"""
