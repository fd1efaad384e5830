# Paired BAF / LRR chart rendering for visual review of CNV calls.

__version__ = "0.1.0"
