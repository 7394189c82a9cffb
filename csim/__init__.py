"""
Cache simulator replaying Valgrind memory traces.

Simulates a set associative cache with LRU replacement and counts
hits, misses and evictions.
"""
