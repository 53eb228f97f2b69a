"""Classic data-structure and algorithm routines: searching, sorting, subarrays, sums, strings and linked lists."""

__version__ = "0.1.0"